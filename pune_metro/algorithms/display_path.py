import logging
from typing import List

from pune_metro.db.catalog import LineCatalog

logger = logging.getLogger(__name__)


def add_inclusive(
    out: List[str], stations: List[str], start: int, stop: int, skip_first: bool = False
) -> None:
    """stations[start..stop] 구간을 방향에 맞게 추가 (양 끝 포함)"""
    if start == -1 or stop == -1:
        return
    if start <= stop:
        first = start + 1 if skip_first else start
        out.extend(stations[first : stop + 1])
    else:
        first = start - 1 if skip_first else start
        out.extend(stations[i] for i in range(first, stop - 1, -1))


class DisplayPathComposer:
    """
    안내용 경로 생성

    MetroGraph의 최단 경로와는 별개로 노선 순서를 그대로 따르는 경로를 만든다.
    같은 노선 내 모든 역 쌍이 간선이므로 최단 경로는 중간역을 건너뛸 수 있지만,
    승객에게는 항상 노선을 따라가는 역 목록을 보여준다.
    """

    def __init__(self, catalog: LineCatalog, interchange_station: str):
        self.catalog = catalog
        self.interchange_station = interchange_station

    def compose(self, source: str, destination: str) -> List[str]:
        src_line = self.catalog.find_line(source)
        dest_line = self.catalog.find_line(destination)

        if src_line is None or dest_line is None:
            logger.debug(f"노선 미확인, 단순 경로 반환: {source} → {destination}")
            return [source, destination]

        route: List[str] = []

        if src_line == dest_line:
            stations = self.catalog.stations(src_line)
            add_inclusive(route, stations, stations.index(source), stations.index(destination))
            return route

        # 출발 노선: source -> 환승역, 도착 노선: 환승역(제외) -> destination
        src_stations = self.catalog.stations(src_line)
        dest_stations = self.catalog.stations(dest_line)

        add_inclusive(
            route,
            src_stations,
            src_stations.index(source),
            _index_or_missing(src_stations, self.interchange_station),
        )
        add_inclusive(
            route,
            dest_stations,
            _index_or_missing(dest_stations, self.interchange_station),
            dest_stations.index(destination),
            skip_first=True,
        )
        return route

    def needs_transfer(self, source: str, destination: str, path: List[str]) -> bool:
        """경로가 환승역을 지나고 출발/도착 노선이 다른 경우"""
        interchange = self.interchange_station
        if interchange not in path or interchange in (source, destination):
            return False

        src_line = self.catalog.find_line(source)
        dest_line = self.catalog.find_line(destination)
        return src_line is not None and dest_line is not None and src_line != dest_line


def _index_or_missing(stations: List[str], station: str) -> int:
    return stations.index(station) if station in stations else -1
