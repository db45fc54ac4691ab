# Business logic services
from .cluster import ClusterOrchestrator, ClusterPlan

__all__ = ['ClusterOrchestrator', 'ClusterPlan']
