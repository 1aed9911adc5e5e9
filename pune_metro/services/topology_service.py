# 노선 구조 변경 서비스 (관리자)

import logging
from typing import Callable, List, Optional, Sequence

from pune_metro.algorithms.fare_matrix import (
    build_fare_matrix,
    expand_for_insert,
    shrink_for_remove,
    is_symmetric,
)
from pune_metro.db.catalog import LineCatalog, normalize_line_name
from pune_metro.db.record_store import RecordStore
from pune_metro.models.domain import Line, MutationResult
from pune_metro.core.exceptions import (
    FarePairNotFoundException,
    ForbiddenOperationException,
    InvalidArgumentException,
    PersistenceException,
    StationNotFoundException,
)
from pune_metro.core.config import settings, MAX_FARE

logger = logging.getLogger(__name__)

FareBuilder = Callable[[int, int], int]


def fare_builder_from_matrix(
    matrix: Sequence[Sequence[int]], size: Optional[int] = None
) -> FareBuilder:
    """입력된 요금 행렬을 (i, j) -> fare 함수로 변환"""
    if size is not None and (
        len(matrix) != size or any(len(row) != size for row in matrix)
    ):
        raise InvalidArgumentException(
            f"요금 행렬은 {size} x {size} 이어야 합니다"
        )

    def fare_for(i: int, j: int) -> int:
        try:
            return matrix[i][j]
        except IndexError:
            raise InvalidArgumentException(
                f"요금 행렬 크기가 역 수와 다릅니다 ({i}, {j})"
            )

    return fare_for


class TopologyService:
    """
    노선 카탈로그 변경 + 데이터 파일 저장

    모든 변경은 검증 -> 카탈로그 반영 -> 전체 카탈로그 저장 순서로 진행된다.
    저장에 실패해도 메모리 상의 변경은 유지되며, 결과에 실패 사유가 포함된다.
    """

    def __init__(
        self,
        catalog: LineCatalog,
        store: RecordStore,
        interchange_station: Optional[str] = None,
        adjacent_fare: Optional[int] = None,
        fallback_fare: Optional[int] = None,
    ):
        self.catalog = catalog
        self.store = store
        self.interchange_station = interchange_station or settings.INTERCHANGE_STATION
        self.adjacent_fare = (
            settings.ADJACENT_FARE if adjacent_fare is None else adjacent_fare
        )
        self.fallback_fare = (
            settings.FALLBACK_FARE if fallback_fare is None else fallback_fare
        )

    def insert_station(
        self, line_name: str, new_station: str, position: int
    ) -> MutationResult:
        """
        노선의 position 번째 위치(1부터) 앞에 역 삽입

        Raises:
            LineNotFoundException: 노선 없음
            InvalidArgumentException: 위치 범위 초과, 빈 이름, 이미 존재하는 역
        """
        line = self.catalog.get_line(line_name)
        new_station = new_station.strip()

        if not 1 <= position <= line.size + 1:
            raise InvalidArgumentException(
                f"삽입 위치는 1 ~ {line.size + 1} 사이여야 합니다: {position}"
            )
        if new_station in line.stations:
            raise InvalidArgumentException(
                f"{line.name} 노선에 이미 있는 역입니다: {new_station}"
            )
        self._check_new_station_names([new_station])

        new_fares = expand_for_insert(
            line.fares, position, self.adjacent_fare, self.fallback_fare
        )
        line.stations.insert(position - 1, new_station)
        line.fares = new_fares

        logger.info(
            f"역 추가: {new_station} → {line.name} ({position}번째), 역 {line.size}개"
        )
        return self._commit(
            f"'{new_station}' 역이 {line.name} 노선에 추가되었습니다", line
        )

    def remove_station(self, line_name: str, station_name: str) -> MutationResult:
        """
        노선에서 역 삭제

        Raises:
            LineNotFoundException: 노선 없음
            StationNotFoundException: 노선에 역이 없음
            ForbiddenOperationException: 환승역 삭제, 역 2개 이하 노선
        """
        station_name = station_name.strip()
        # 환승역은 노선과 관계없이 항상 거부
        if station_name == self.interchange_station:
            raise ForbiddenOperationException(
                f"환승역 '{station_name}'은(는) 삭제할 수 없습니다"
            )

        line = self.catalog.get_line(line_name)
        index = line.index_of(station_name)
        if index == -1:
            raise StationNotFoundException(
                f"{line.name} 노선에 '{station_name}' 역이 없습니다"
            )
        if line.size <= 2:
            raise ForbiddenOperationException(
                "노선에는 최소 2개의 역이 있어야 합니다"
            )

        line.fares = shrink_for_remove(line.fares, index)
        del line.stations[index]

        logger.info(f"역 삭제: {station_name} ← {line.name}, 역 {line.size}개")
        return self._commit(
            f"'{station_name}' 역이 {line.name} 노선에서 삭제되었습니다", line
        )

    def add_line(
        self,
        name: str,
        stations: List[str],
        distance: int,
        fare_builder: FareBuilder,
    ) -> MutationResult:
        """
        신규 노선 추가

        fare_builder(i, j)는 대각선을 제외한 모든 역 쌍에 대해 호출된다.

        Raises:
            ForbiddenOperationException: 이미 존재하는 노선 이름
            InvalidArgumentException: 빈 역 목록, 중복 역, 거리 <= 0, 비대칭/음수/상한 초과 요금,
                줄바꿈이 포함된 이름
        """
        line_name = normalize_line_name(name)
        if not line_name:
            raise InvalidArgumentException("노선 이름이 비어있습니다")
        _check_single_line(line_name, "노선 이름")
        if self.catalog.has_line(line_name):
            raise ForbiddenOperationException(f"이미 존재하는 노선입니다: {line_name}")

        stations = [s.strip() for s in stations]
        if not stations:
            raise InvalidArgumentException("역 목록이 비어있습니다")
        if len(set(stations)) != len(stations):
            raise InvalidArgumentException("노선 내 중복된 역이 있습니다")
        if distance <= 0:
            raise InvalidArgumentException(f"거리 가중치는 양수여야 합니다: {distance}")
        self._check_new_station_names(stations)

        fares = build_fare_matrix(len(stations), fare_builder)
        if not is_symmetric(fares):
            raise InvalidArgumentException("요금 행렬이 대칭이 아닙니다")
        if any(value < 0 for row in fares for value in row):
            raise InvalidArgumentException("요금은 음수일 수 없습니다")
        if any(value > MAX_FARE for row in fares for value in row):
            raise InvalidArgumentException(f"요금은 {MAX_FARE} 이하여야 합니다")

        line = Line(name=line_name, stations=stations, distance=distance, fares=fares)
        self.catalog.put_line(line)

        logger.info(f"노선 추가: {line_name}, 역 {line.size}개, distance={distance}")
        return self._commit(f"'{line_name}' 노선이 추가되었습니다", line)

    def update_fare(
        self, source: str, destination: str, new_fare: int
    ) -> MutationResult:
        """
        두 역이 함께 포함된 첫 번째 노선의 요금을 대칭으로 변경

        Raises:
            InvalidArgumentException: 음수 또는 상한 초과 요금, 같은 역
            FarePairNotFoundException: 두 역을 함께 포함한 노선 없음
        """
        source, destination = source.strip(), destination.strip()
        if new_fare < 0:
            raise InvalidArgumentException(f"요금은 음수일 수 없습니다: {new_fare}")
        if new_fare > MAX_FARE:
            raise InvalidArgumentException(f"요금은 {MAX_FARE} 이하여야 합니다: {new_fare}")
        if source == destination:
            raise InvalidArgumentException("출발역과 도착역이 같습니다")

        for line in self.catalog:
            src_idx = line.index_of(source)
            dest_idx = line.index_of(destination)
            if src_idx != -1 and dest_idx != -1:
                line.fares[src_idx][dest_idx] = new_fare
                line.fares[dest_idx][src_idx] = new_fare

                logger.info(
                    f"요금 변경: {source} ↔ {destination} = {new_fare} ({line.name})"
                )
                return self._commit(
                    f"'{source}' ↔ '{destination}' 요금이 ₹{new_fare}(으)로 변경되었습니다",
                    line,
                )

        raise FarePairNotFoundException(
            f"'{source}', '{destination}' 역이 함께 포함된 노선이 없습니다"
        )

    def _check_new_station_names(self, names: List[str]) -> None:
        """역 이름은 전체 노선도에서 유일 (환승역 제외)"""
        for station in names:
            if not station:
                raise InvalidArgumentException("역 이름이 비어있습니다")
            if "," in station:
                raise InvalidArgumentException(f"역 이름에 쉼표를 쓸 수 없습니다: {station}")
            _check_single_line(station, "역 이름")
            if station != self.interchange_station and self.catalog.has_station(station):
                raise InvalidArgumentException(f"이미 존재하는 역입니다: {station}")

    def _commit(self, message: str, line: Line) -> MutationResult:
        """변경 후 전체 카탈로그 저장"""
        try:
            self.store.save(self.catalog)
        except PersistenceException as e:
            logger.error(f"변경은 반영되었으나 저장 실패: {e.message}")
            return MutationResult(
                success=True,
                message=message,
                persisted=False,
                persistence_error=e.message,
                line=line,
            )

        return MutationResult(success=True, message=message, persisted=True, line=line)


# 데이터 파일은 한 줄 단위 레코드 => 줄바꿈 문자가 들어간 이름은 저장 후 다시 읽을 수 없음
def _check_single_line(name: str, what: str) -> None:
    if name.splitlines() != [name]:
        raise InvalidArgumentException(f"{what}에 줄바꿈 문자를 쓸 수 없습니다: {name!r}")
