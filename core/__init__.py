# Core module - configuration, errors, kubernetes client
from .config import settings, ClusterConfig, load_cluster_config
from .exceptions import (
    ClusterError,
    ConfigurationError,
    ClusterValidationError,
    ClientAcquisitionError,
    SubmissionError,
    SubmissionCancelled,
    OperationNotImplemented,
)
from .kubernetes import get_k8s_clients

__all__ = [
    'settings',
    'ClusterConfig',
    'load_cluster_config',
    'ClusterError',
    'ConfigurationError',
    'ClusterValidationError',
    'ClientAcquisitionError',
    'SubmissionError',
    'SubmissionCancelled',
    'OperationNotImplemented',
    'get_k8s_clients',
]
