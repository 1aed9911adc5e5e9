# 노선 카탈로그로부터 매 조회마다 새로 만드는 가중 무방향 그래프
import heapq
import itertools
import math
import logging
from typing import Dict, List, Tuple, Iterable

logger = logging.getLogger(__name__)

# 도달 불가 sentinel
INFINITY = float("inf")


def is_unreachable(distance: float) -> bool:
    return math.isinf(distance)


class MetroGraph:
    def __init__(self):
        # {station: {neighbor: distance}}
        self.adj_list: Dict[str, Dict[str, int]] = {}
        # {station: {neighbor: fare}} <- adj_list와 동일한 구조
        self.fare_map: Dict[str, Dict[str, int]] = {}

    def add_edge(self, a: str, b: str, distance: int, fare: int) -> None:
        """양방향 간선 추가 (없는 역은 생성, 기존 간선은 덮어씀)"""
        self.adj_list.setdefault(a, {})
        self.adj_list.setdefault(b, {})
        self.fare_map.setdefault(a, {})
        self.fare_map.setdefault(b, {})

        self.adj_list[a][b] = distance
        self.adj_list[b][a] = distance
        self.fare_map[a][b] = fare
        self.fare_map[b][a] = fare

    def stations(self) -> List[str]:
        return list(self.adj_list.keys())

    def has_station(self, station: str) -> bool:
        return station in self.adj_list

    def fare(self, a: str, b: str) -> int:
        """두 역 간 요금, 간선이 없으면 0"""
        return self.fare_map.get(a, {}).get(b, 0)

    def update_fare(self, a: str, b: str, new_fare: int) -> None:
        """이미 존재하는 방향에 대해서만 요금 갱신, 없으면 무시"""
        if b in self.fare_map.get(a, {}):
            self.fare_map[a][b] = new_fare
        if a in self.fare_map.get(b, {}):
            self.fare_map[b][a] = new_fare

    def path_fare(self, path: Iterable[str]) -> int:
        """경로 상 연속한 두 역의 요금 합"""
        path = list(path)
        return sum(self.fare(path[i], path[i + 1]) for i in range(len(path) - 1))

    def shortest_path(self, start: str, end: str) -> Tuple[float, List[str]]:
        """
        Dijkstra 최단 거리 경로

        Args:
            start: 출발역
            end: 도착역

        Returns:
            (총 거리, 역 순서 리스트)
            도달 불가 => (INFINITY, [end])
        """
        dist: Dict[str, float] = {station: INFINITY for station in self.adj_list}
        dist[start] = 0
        prev: Dict[str, str] = {}

        # 같은 거리일 때 먼저 push된 역이 먼저 pop 되도록 counter 사용
        counter = itertools.count()
        pq = [(0, next(counter), start)]

        while pq:
            cur_dist, _, current = heapq.heappop(pq)
            if current == end:
                break
            # 이미 더 짧은 거리로 처리된 stale entry
            if cur_dist > dist[current]:
                continue

            for neighbor, weight in self.adj_list.get(current, {}).items():
                new_dist = cur_dist + weight
                # strict < => 먼저 relax 된 이웃이 유지됨
                if new_dist < dist.get(neighbor, INFINITY):
                    dist[neighbor] = new_dist
                    prev[neighbor] = current
                    heapq.heappush(pq, (new_dist, next(counter), neighbor))

        # 역추적 end -> start
        path = []
        step = end
        while step is not None:
            path.append(step)
            step = prev.get(step)
        path.reverse()

        total = dist.get(end, INFINITY)
        logger.debug(f"최단 경로: {start} → {end}, distance={total}, hops={len(path) - 1}")
        return total, path
