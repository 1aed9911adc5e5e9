# 경로 찾기 서비스

import logging
import time
import json
from typing import Optional, Dict, Any, List

from pune_metro.algorithms.metro_graph import MetroGraph, is_unreachable
from pune_metro.algorithms.display_path import DisplayPathComposer
from pune_metro.db.catalog import LineCatalog
from pune_metro.models.domain import RouteResult, NumberedStation
from pune_metro.core.exceptions import StationNotFoundException
from pune_metro.core.config import settings

logger = logging.getLogger(__name__)


class PathfindingService:

    def __init__(
        self,
        catalog: LineCatalog,
        interchange_station: Optional[str] = None,
        enable_metrics: Optional[bool] = None,
    ):
        self.catalog = catalog
        self.interchange_station = interchange_station or settings.INTERCHANGE_STATION
        self.enable_metrics = (
            settings.ENABLE_ROUTE_METRICS if enable_metrics is None else enable_metrics
        )
        self.composer = DisplayPathComposer(catalog, self.interchange_station)

    def build_network(self) -> MetroGraph:
        """
        카탈로그 => MetroGraph (매 조회마다 새로 생성)

        같은 노선의 모든 역 쌍을 노선 거리 가중치와 해당 쌍의 요금으로 연결하고,
        환승역에는 0 가중치 self-loop를 추가해 항상 그래프에 존재하도록 한다.
        """
        graph = MetroGraph()
        for line in self.catalog:
            stations = line.stations
            for i in range(len(stations)):
                for j in range(len(stations)):
                    graph.add_edge(stations[i], stations[j], line.distance, line.fares[i][j])

        graph.add_edge(self.interchange_station, self.interchange_station, 0, 0)
        logger.debug(
            f"MetroGraph 생성: 역 {len(graph.stations())}개, 노선 {len(self.catalog)}개"
        )
        return graph

    def route(self, start: str, end: str) -> RouteResult:
        """
        최단 거리 경로 + 경로 요금

        Raises:
            StationNotFoundException: 노선도에 없는 역

        도달 불가는 예외가 아니라 distance == INFINITY 로 표현
        """
        graph = self.build_network()

        if not graph.has_station(start):
            raise StationNotFoundException(f"출발지 역을 찾을 수 없습니다: {start}")
        if not graph.has_station(end):
            raise StationNotFoundException(f"목적지 역을 찾을 수 없습니다: {end}")

        distance, path = graph.shortest_path(start, end)
        total_fare = 0 if is_unreachable(distance) else graph.path_fare(path)

        return RouteResult(
            start=start, end=end, distance=distance, path=path, total_fare=total_fare
        )

    def display_route(self, start: str, end: str) -> List[str]:
        return self.composer.compose(start, end)

    def calculate_route(self, origin: str, destination: str) -> Dict[str, Any]:
        """
        경로 계산 (API 응답용)

        Args:
            origin: 출발지 역 이름
            destination: 목적지 역 이름

        Returns:
            최단 경로, 안내용 경로, 총 요금, 환승 안내를 포함한 딕셔너리

        Raises:
            StationNotFoundException: 역을 찾을 수 없을 때
        """
        start_time = time.time()

        result = self.route(origin, destination)
        display_path = self.display_route(origin, destination)

        transfer_station = None
        if result.reachable and self.composer.needs_transfer(
            origin, destination, result.path
        ):
            transfer_station = self.interchange_station

        if not result.reachable:
            logger.warning(f"도달 불가 경로: {origin} → {destination}")

        elapsed_time = time.time() - start_time
        logger.info(
            f"경로 계산: {origin} → {destination}, fare={result.total_fare}, "
            f"응답시간={elapsed_time * 1000:.1f}ms"
        )
        self._log_route_metrics(
            response_time_ms=elapsed_time * 1000,
            origin=origin,
            destination=destination,
            reachable=result.reachable,
            hops=len(result.path) - 1,
        )

        return {
            "origin": origin,
            "destination": destination,
            "reachable": result.reachable,
            "distance": int(result.distance) if result.reachable else None,
            "path": result.path,
            "display_path": display_path,
            "total_fare": result.total_fare,
            "transfer_station": transfer_station,
        }

    def list_stations(self) -> List[NumberedStation]:
        """
        노선 순서대로 1부터 번호를 매긴 역 목록 (승객 역 선택용)
        환승역은 속한 노선마다 한 번씩 등장
        """
        numbered = []
        counter = 1
        for line in self.catalog:
            for station in line.stations:
                numbered.append(
                    NumberedStation(
                        number=counter,
                        name=station,
                        line=line.name,
                        is_interchange=station == self.interchange_station,
                    )
                )
                counter += 1
        return numbered

    def station_by_number(self, number: int) -> str:
        counter = 1
        for line in self.catalog:
            if counter <= number < counter + line.size:
                return line.stations[number - counter]
            counter += line.size
        raise StationNotFoundException(f"역 번호를 찾을 수 없습니다: {number}")

    def _log_route_metrics(
        self,
        response_time_ms: float,
        origin: str,
        destination: str,
        reachable: bool,
        hops: int,
    ) -> None:
        """경로 계산 메트릭 로깅"""
        if not self.enable_metrics:
            return

        metrics = {
            "event": "route_calculation",
            "response_time_ms": round(response_time_ms, 2),
            "origin": origin,
            "destination": destination,
            "reachable": reachable,
            "hops": hops,
            "lines": len(self.catalog),
        }

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
