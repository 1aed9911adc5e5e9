"""
Business logic services
"""

from pune_metro.services.pathfinding_service import PathfindingService
from pune_metro.services.topology_service import TopologyService, fare_builder_from_matrix
from pune_metro.services.metro_context import MetroContext, create_context

__all__ = [
    "PathfindingService",
    "TopologyService",
    "fare_builder_from_matrix",
    "MetroContext",
    "create_context",
]
