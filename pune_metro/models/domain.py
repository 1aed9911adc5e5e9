from typing import List, Optional
from dataclasses import dataclass
import math

from pune_metro.core.config import MAX_FARE

# domain 정의


@dataclass
class Line:
    name: str  # 소문자로 정규화된 노선 이름
    stations: List[str]  # 노선 순서대로의 역 이름
    distance: int  # 1 hop 당 거리 가중치
    fares: List[List[int]]  # n x n 요금 행렬 (역 순서 index)

    @property
    def size(self) -> int:
        return len(self.stations)

    def index_of(self, station: str) -> int:
        """노선 내 역 위치 (없으면 -1)"""
        try:
            return self.stations.index(station)
        except ValueError:
            return -1

    def validation_errors(self) -> List[str]:
        """
        노선 불변식 검사

        - 역 목록이 비어있지 않아야 함
        - 거리 가중치 > 0
        - 요금 행렬은 n x n, 대칭, 대각선 0, 0 <= 요금 <= MAX_FARE
        """
        errors = []
        n = len(self.stations)

        if n == 0:
            errors.append(f"{self.name}: 역 목록이 비어있습니다")
        if self.distance <= 0:
            errors.append(f"{self.name}: 거리 가중치는 양수여야 합니다 ({self.distance})")

        if len(self.fares) != n or any(len(row) != n for row in self.fares):
            errors.append(f"{self.name}: 요금 행렬 크기가 역 수({n})와 다릅니다")
            return errors

        for i in range(n):
            if self.fares[i][i] != 0:
                errors.append(f"{self.name}: 대각선 요금은 0이어야 합니다 ({i})")
            for j in range(i + 1, n):
                if self.fares[i][j] != self.fares[j][i]:
                    errors.append(f"{self.name}: 요금 행렬이 대칭이 아닙니다 ({i}, {j})")
                if self.fares[i][j] < 0:
                    errors.append(f"{self.name}: 음수 요금 ({i}, {j})")
                if self.fares[i][j] > MAX_FARE:
                    errors.append(f"{self.name}: 요금 상한 초과 ({i}, {j})")

        return errors

    def copy(self) -> "Line":
        return Line(
            name=self.name,
            stations=list(self.stations),
            distance=self.distance,
            fares=[list(row) for row in self.fares],
        )


@dataclass
class RouteResult:
    start: str
    end: str
    distance: float  # 도달 불가 => INFINITY
    path: List[str]
    total_fare: int

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.distance)


@dataclass
class MutationResult:
    # 검증 실패는 예외로 전달 => 반환된 결과는 항상 success=True
    success: bool
    message: str
    persisted: bool = False
    persistence_error: Optional[str] = None
    line: Optional[Line] = None


@dataclass
class NumberedStation:
    number: int
    name: str
    line: str
    is_interchange: bool = False
