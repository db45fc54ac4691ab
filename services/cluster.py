"""
Spark 클러스터 생성 오케스트레이션

처리 순서:
1. 설정/요청 검증
2. K8s 클라이언트 획득, master Deployment + Service 2개 스펙 생성
3. master Service에서 마스터 URL을 구해 worker Deployment 스펙 생성
4. master Deployment → worker Deployment → master Service → webui Service 순서로 제출
5. 요청값으로 응답 생성

제출 중 실패하면 남은 제출을 중단하고 부분 생성 상태를 SubmissionError로 알린다 (롤백 없음).
"""
import logging
import re
import threading
from typing import Callable, List, Optional, Tuple

from kubernetes.client.rest import ApiException
from urllib3.exceptions import (
    HTTPError,
    MaxRetryError,
    NewConnectionError,
    TimeoutError as UrllibTimeoutError,
)

from core.config import ClusterConfig
from core.exceptions import (
    ClientAcquisitionError,
    ClusterValidationError,
    SubmissionCancelled,
    SubmissionError,
)
from core.kubernetes import get_k8s_clients
from models.cluster import (
    CLUSTER_NAME_MAX_LENGTH,
    CLUSTER_NAME_PATTERN,
    ClusterCreated,
    ClusterModel,
    ClusterRequest,
)
from models.errors import SubmittedObject
from models.specs import ServiceSpec, WorkloadSpec
from utils.k8s import to_deployment, to_service

from .specs import (
    MASTER_PORT_NAME,
    WEBUI_PORT_NAME,
    build_master,
    build_worker,
    expose,
    spark_master_url,
)

logger = logging.getLogger(__name__)


def _is_timeout(exc: Exception) -> bool:
    if isinstance(exc, MaxRetryError):
        exc = exc.reason
    # NewConnectionError는 ConnectTimeoutError 하위 클래스지만 타임아웃이 아니다
    return isinstance(exc, UrllibTimeoutError) and not isinstance(exc, NewConnectionError)


class ClusterPlan:
    """한 번의 생성 요청에서 만들어진 스펙 묶음"""

    def __init__(
        self,
        master: WorkloadSpec,
        worker: WorkloadSpec,
        master_service: ServiceSpec,
        webui_service: ServiceSpec,
        master_url: str,
    ):
        self.master = master
        self.worker = worker
        self.master_service = master_service
        self.webui_service = webui_service
        self.master_url = master_url


class ClusterOrchestrator:
    """Spark 클러스터 생성기

    Args:
        config: 검증된 ClusterConfig
        client_factory: kubeconfig 경로를 받아 (CoreV1Api, AppsV1Api)를 반환하는 함수
    """

    def __init__(
        self,
        config: ClusterConfig,
        client_factory: Optional[Callable[[str], Tuple]] = None,
    ):
        self._config = config
        self._client_factory = client_factory or get_k8s_clients

    def plan(self, request: ClusterRequest) -> ClusterPlan:
        """K8s 호출 없이 클러스터 스펙만 생성"""
        namespace = self._config.namespace
        image = self._config.image

        # masterCount는 무시 - 마스터는 항상 1개
        master = build_master(namespace, image, cluster_name=request.name)
        master_service, master_port = expose(master, master.name, MASTER_PORT_NAME)
        webui_service, _ = expose(master, f"{master.name}-webui", WEBUI_PORT_NAME)

        # 워커는 Pod가 아니라 master Service 이름/포트로 접속한다
        master_url = spark_master_url(master_service.name, master_port)
        worker = build_worker(
            namespace, image, request.worker_count, master_url, cluster_name=request.name
        )
        return ClusterPlan(master, worker, master_service, webui_service, master_url)

    def create_cluster(
        self,
        request: ClusterRequest,
        cancel_event: Optional[threading.Event] = None,
    ) -> ClusterCreated:
        """클러스터 생성

        cancel_event는 각 제출 직전에 확인한다. HTTP 라우트는 넘기지 않으므로
        취소는 오케스트레이터를 직접 호출하는 코드에서만 쓸 수 있다.

        Raises:
            ClusterValidationError: 이름이 라벨 값 형식이 아니거나 worker_count가 음수일 때 (제출 전)
            ClientAcquisitionError: K8s 클라이언트 생성 실패 (아무것도 제출하지 않음)
            SubmissionError: 오브젝트 제출 실패 (created/failed에 부분 상태 포함)
            SubmissionCancelled: cancel_event가 설정됨 (남은 제출 중단)
        """
        if len(request.name) > CLUSTER_NAME_MAX_LENGTH or not re.fullmatch(CLUSTER_NAME_PATTERN, request.name):
            raise ClusterValidationError(
                f"name must be a valid label value (at most {CLUSTER_NAME_MAX_LENGTH} characters, "
                f"alphanumeric at both ends, - _ . inside), got {request.name!r}"
            )
        if request.worker_count < 0:
            raise ClusterValidationError(
                f"workerCount must be >= 0, got {request.worker_count}"
            )

        logger.info(f"Creating cluster {request.name} with {request.worker_count} workers "
                    f"in namespace {self._config.namespace}")

        try:
            core_v1, apps_v1 = self._client_factory(self._config.kube_config)
        except ClientAcquisitionError:
            raise
        except Exception as e:
            logger.error(f"K8s client acquisition failed: {e}")
            raise ClientAcquisitionError(str(e)) from e

        plan = self.plan(request)
        logger.info(f"Cluster {request.name}: master {plan.master.name}, url {plan.master_url}")

        submitted = self._submit_all(plan, core_v1, apps_v1, cancel_event)

        logger.info(f"Cluster {request.name} created ({len(submitted)} objects)")
        return ClusterCreated(
            cluster=ClusterModel(
                name=request.name,
                worker_count=request.worker_count,
                master_count=request.master_count,
            ),
            location=plan.master_url,
            objects=submitted,
        )

    def _submit_all(self, plan: ClusterPlan, core_v1, apps_v1, cancel_event) -> List[SubmittedObject]:
        namespace = self._config.namespace
        steps = [
            ("Deployment", plan.master.name, apps_v1.create_namespaced_deployment, to_deployment(plan.master)),
            ("Deployment", plan.worker.name, apps_v1.create_namespaced_deployment, to_deployment(plan.worker)),
            ("Service", plan.master_service.name, core_v1.create_namespaced_service, to_service(plan.master_service)),
            ("Service", plan.webui_service.name, core_v1.create_namespaced_service, to_service(plan.webui_service)),
        ]

        submitted: List[SubmittedObject] = []
        for kind, name, create, body in steps:
            obj = SubmittedObject(kind=kind, name=name)

            if cancel_event is not None and cancel_event.is_set():
                logger.warning(f"Cluster creation cancelled before {obj}")
                raise SubmissionCancelled(
                    f"creation cancelled before {obj} was submitted",
                    created=submitted,
                    failed=obj,
                )

            try:
                create(namespace, body, _request_timeout=self._config.submit_timeout)
            except ApiException as e:
                logger.error(f"{obj} rejected: {e.status} {e.reason}")
                raise SubmissionError(
                    f"{obj} was rejected: {e.status} {e.reason}",
                    created=submitted,
                    failed=obj,
                ) from e
            except HTTPError as e:
                timed_out = _is_timeout(e)
                logger.error(f"{obj} submission failed (timeout={timed_out}): {e}")
                raise SubmissionError(
                    f"{obj} could not be submitted: {'timed out' if timed_out else e}",
                    created=submitted,
                    failed=obj,
                    retryable=timed_out,
                ) from e

            logger.info(f"Submitted {obj}")
            submitted.append(obj)

        return submitted


__all__ = ['ClusterOrchestrator', 'ClusterPlan']
