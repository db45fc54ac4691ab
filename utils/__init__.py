# Utility functions
from .helpers import generate_suffix
from .k8s import to_deployment, to_service

__all__ = ['generate_suffix', 'to_deployment', 'to_service']
