"""
Spark 클러스터 스펙 빌더

- pod_selector: Deployment와 Service가 공유하는 셀렉터
- build_master / build_worker: Deployment 스펙
- build_service / expose: Service 스펙
- spark_master_url: 워커가 접속할 마스터 URL
"""
from typing import Dict, Optional, Tuple

from models.specs import (
    ContainerPort,
    ContainerSpec,
    ServicePort,
    ServiceSpec,
    UpdateStrategy,
    WorkloadSpec,
)
from utils.helpers import generate_suffix

MASTER_NAME = "spark-master"
WORKER_NAME = "spark-worker"
MASTER_PORT_NAME = "spark-master"
WEBUI_PORT_NAME = "spark-webui"
MASTER_PORT = 7077
WEBUI_PORT = 8080

# 클러스터 식별용 메타데이터 라벨 (셀렉터에는 넣지 않음)
CLUSTER_LABEL = "oshinko-cluster"


def pod_selector(workload_name: str) -> Dict[str, str]:
    """워크로드가 관리하는 Pod를 식별하는 셀렉터"""
    return {"name": workload_name}


def _object_labels(selector: Dict[str, str], cluster_name: Optional[str]) -> Dict[str, str]:
    labels = dict(selector)
    if cluster_name:
        labels[CLUSTER_LABEL] = cluster_name
    return labels


def build_master(
    namespace: str,
    image: str,
    cluster_name: Optional[str] = None,
    suffix: Optional[str] = None,
) -> WorkloadSpec:
    """Spark master Deployment 스펙 생성

    이름은 spark-master-<suffix>로 호출마다 새 suffix를 붙인다.
    요청의 masterCount는 무시하고 replicas는 항상 1이다.
    컨테이너는 자기 이름을 인자로 /start-master를 실행해 서비스 이름으로 자신을 알린다.
    """
    name = f"{MASTER_NAME}-{suffix or generate_suffix()}"
    selector = pod_selector(name)

    container = ContainerSpec(
        name=name,
        image=image,
        command=("/start-master", name),
        ports=(
            ContainerPort(name=MASTER_PORT_NAME, container_port=MASTER_PORT),
            ContainerPort(name=WEBUI_PORT_NAME, container_port=WEBUI_PORT),
        ),
    )
    return WorkloadSpec(
        name=name,
        namespace=namespace,
        replicas=1,
        update_strategy=UpdateStrategy.ROLLING_ON_CHANGE,
        pod_selector=selector,
        container=container,
        labels=_object_labels(selector, cluster_name),
    )


def build_worker(
    namespace: str,
    image: str,
    replicas: int,
    master_url: str,
    cluster_name: Optional[str] = None,
) -> WorkloadSpec:
    """Spark worker Deployment 스펙 생성

    이름은 spark-worker로 고정이라 같은 네임스페이스에 두 번 생성하면 충돌한다.
    replicas는 여기서 검증하지 않는다.
    """
    selector = pod_selector(WORKER_NAME)
    container = ContainerSpec(
        name=WORKER_NAME,
        image=image,
        command=("/start-worker", master_url),
    )
    return WorkloadSpec(
        name=WORKER_NAME,
        namespace=namespace,
        replicas=replicas,
        update_strategy=UpdateStrategy.ROLLING_ON_CHANGE,
        pod_selector=selector,
        container=container,
        labels=_object_labels(selector, cluster_name),
    )


def build_service(
    name: str,
    port: int,
    selector: Dict[str, str],
    namespace: Optional[str] = None,
    labels: Optional[Dict[str, str]] = None,
) -> Tuple[ServiceSpec, ServicePort]:
    """Service 스펙과 할당된 포트를 함께 반환

    selector는 노출할 워크로드의 pod_selector를 그대로 넘겨야 한다.
    """
    spec = ServiceSpec(
        name=name,
        namespace=namespace,
        selector=selector,
        labels=labels if labels is not None else dict(selector),
        port=ServicePort(port=port, target_port=port),
    )
    return spec, spec.port


def expose(workload: WorkloadSpec, name: str, port_name: str) -> Tuple[ServiceSpec, ServicePort]:
    """워크로드의 이름 있는 포트를 Service로 노출

    셀렉터는 항상 워크로드의 pod_selector에서 가져온다.
    """
    port = workload.find_port(port_name)
    if port is None:
        raise ValueError(f"{workload.name} has no port named {port_name}")
    return build_service(
        name,
        port,
        workload.pod_selector,
        namespace=workload.namespace,
        labels=workload.labels,
    )


def spark_master_url(service_name: str, port: ServicePort) -> str:
    """spark://<service>:<port>"""
    return f"spark://{service_name}:{port.port}"


__all__ = [
    "MASTER_PORT_NAME",
    "WEBUI_PORT_NAME",
    "CLUSTER_LABEL",
    "pod_selector",
    "build_master",
    "build_worker",
    "build_service",
    "expose",
    "spark_master_url",
]
