# Pydantic models
from .cluster import ClusterRequest, ClusterModel, SingleCluster, ClusterCreated
from .specs import (
    UpdateStrategy, ContainerPort, ContainerSpec, WorkloadSpec, ServicePort, ServiceSpec
)
from .errors import CreationState, SubmittedObject, ErrorModel, ErrorResponse

__all__ = [
    # Cluster
    'ClusterRequest', 'ClusterModel', 'SingleCluster', 'ClusterCreated',
    # Specs
    'UpdateStrategy', 'ContainerPort', 'ContainerSpec', 'WorkloadSpec',
    'ServicePort', 'ServiceSpec',
    # Errors
    'CreationState', 'SubmittedObject', 'ErrorModel', 'ErrorResponse',
]
