"""
최단 경로(Dijkstra), 요금 행렬 재구성, 안내 경로 생성
"""

from pune_metro.algorithms.metro_graph import MetroGraph, INFINITY, is_unreachable
from pune_metro.algorithms.display_path import DisplayPathComposer
from pune_metro.algorithms.fare_matrix import (
    expand_for_insert,
    shrink_for_remove,
    build_fare_matrix,
    banded_fare_matrix,
)

__all__ = [
    "MetroGraph",
    "INFINITY",
    "is_unreachable",
    "DisplayPathComposer",
    "expand_for_insert",
    "shrink_for_remove",
    "build_fare_matrix",
    "banded_fare_matrix",
]
