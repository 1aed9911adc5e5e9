"""
노선 카탈로그 (노선도의 원본 데이터)

노선 이름 -> Line 매핑을 보관하는 context 객체
- 전역 상태 X => 서비스 생성 시 명시적으로 주입
- 카탈로그 순서 = 노선이 추가된 순서 (dict 삽입 순서)
- MetroGraph는 매 조회마다 이 카탈로그로부터 새로 생성됨
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from pune_metro.models.domain import Line
from pune_metro.core.exceptions import LineNotFoundException

logger = logging.getLogger(__name__)

# (노선 이름, 역 목록, 거리 가중치, 요금 행렬) => 레코드 파일 한 블록
LineRecord = Tuple[str, List[str], int, List[List[int]]]


def normalize_line_name(name: str) -> str:
    return name.strip().lower()


class LineCatalog:
    def __init__(self, lines: Optional[List[Line]] = None):
        self._lines: Dict[str, Line] = {}
        for line in lines or []:
            self.put_line(line)

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, line_name: str) -> bool:
        return self.has_line(line_name)

    def __iter__(self) -> Iterator[Line]:
        return iter(list(self._lines.values()))

    def line_names(self) -> List[str]:
        return list(self._lines.keys())

    def has_line(self, line_name: str) -> bool:
        return normalize_line_name(line_name) in self._lines

    def get_line(self, line_name: str) -> Line:
        line = self._lines.get(normalize_line_name(line_name))
        if line is None:
            raise LineNotFoundException(f"노선을 찾을 수 없습니다: {line_name}")
        return line

    def stations(self, line_name: str) -> List[str]:
        return self.get_line(line_name).stations

    def fares(self, line_name: str) -> List[List[int]]:
        return self.get_line(line_name).fares

    def distance(self, line_name: str) -> int:
        return self.get_line(line_name).distance

    def put_line(self, line: Line) -> None:
        """노선 추가 또는 교체 (이름은 소문자로 정규화)"""
        line.name = normalize_line_name(line.name)
        self._lines[line.name] = line

    def find_line(self, station: str) -> Optional[str]:
        """역이 속한 첫 번째 노선 (카탈로그 순서)"""
        for name, line in self._lines.items():
            if station in line.stations:
                return name
        return None

    def lines_containing(self, station: str) -> List[str]:
        return [name for name, line in self._lines.items() if station in line.stations]

    def all_stations(self) -> List[str]:
        """전체 역 이름 (중복 제거, 카탈로그 순서 유지)"""
        seen = {}
        for line in self._lines.values():
            for station in line.stations:
                seen.setdefault(station, None)
        return list(seen.keys())

    def has_station(self, station: str) -> bool:
        return self.find_line(station) is not None

    def records(self) -> Iterator[LineRecord]:
        for line in self._lines.values():
            yield line.name, list(line.stations), line.distance, [list(r) for r in line.fares]

    def copy(self) -> "LineCatalog":
        return LineCatalog([line.copy() for line in self._lines.values()])

    def to_dict(self) -> Dict[str, Dict]:
        return {
            name: {
                "stations": list(line.stations),
                "distance": line.distance,
                "fares": [list(r) for r in line.fares],
            }
            for name, line in self._lines.items()
        }
