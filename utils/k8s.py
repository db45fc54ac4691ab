"""
스펙 → Kubernetes 클라이언트 오브젝트 변환
"""
from kubernetes import client

from models.specs import ServiceSpec, UpdateStrategy, WorkloadSpec

_STRATEGY_TYPES = {
    UpdateStrategy.ROLLING_ON_CHANGE: "RollingUpdate",
}


def to_deployment(spec: WorkloadSpec) -> client.V1Deployment:
    """WorkloadSpec을 V1Deployment로 변환

    selector와 Pod 템플릿 라벨은 같은 pod_selector를 사용한다.
    """
    container = spec.container
    ports = [
        client.V1ContainerPort(name=p.name, container_port=p.container_port)
        for p in container.ports
    ]

    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(
            name=spec.name,
            namespace=spec.namespace,
            labels=dict(spec.labels) or None,
        ),
        spec=client.V1DeploymentSpec(
            replicas=spec.replicas,
            strategy=client.V1DeploymentStrategy(type=_STRATEGY_TYPES[spec.update_strategy]),
            selector=client.V1LabelSelector(match_labels=dict(spec.pod_selector)),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(labels=dict(spec.pod_selector)),
                spec=client.V1PodSpec(
                    containers=[
                        client.V1Container(
                            name=container.name,
                            image=container.image,
                            command=list(container.command) or None,
                            ports=ports or None,
                        )
                    ]
                ),
            ),
        ),
    )


def to_service(spec: ServiceSpec) -> client.V1Service:
    """ServiceSpec을 V1Service로 변환"""
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=spec.name,
            namespace=spec.namespace,
            labels=dict(spec.labels) or None,
        ),
        spec=client.V1ServiceSpec(
            selector=dict(spec.selector),
            ports=[
                client.V1ServicePort(port=spec.port.port, target_port=spec.port.target_port)
            ],
            type="ClusterIP",
        ),
    )
