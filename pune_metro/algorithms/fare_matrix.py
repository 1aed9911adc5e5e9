"""
요금 행렬 재구성 유틸리티

노선 구조 변경(역 추가/삭제, 신규 노선) 시 역 순서에 맞는 n x n 요금 행렬을 만든다.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

FareMatrix = List[List[int]]


def expand_for_insert(
    fares: Sequence[Sequence[int]],
    position: int,
    adjacent_fare: int,
    fallback_fare: int,
) -> FareMatrix:
    """
    역 삽입 후 요금 행렬 (근사 heuristic)

    - 대각선 => 0
    - 새 순서에서 인접한 두 역 => adjacent_fare
    - 나머지 => 삽입 위치 이후 index를 1 당겨서 기존 값 복사,
      기존 행렬 범위를 벗어나면 fallback_fare

    Args:
        fares: 삽입 전 요금 행렬 (n x n)
        position: 1부터 시작하는 삽입 위치 (1 <= position <= n + 1)
    """
    old = np.asarray(fares, dtype=np.int64).reshape(len(fares), len(fares))
    n = old.shape[0]
    size = n + 1
    inserted_at = position - 1

    idx = np.arange(size)
    old_idx = np.where(idx > inserted_at, idx - 1, idx)
    valid = old_idx < n

    new = np.full((size, size), fallback_fare, dtype=np.int64)
    if n > 0:
        safe_idx = np.minimum(old_idx, n - 1)
        copied = old[np.ix_(safe_idx, safe_idx)]
        mask = valid[:, None] & valid[None, :]
        new[mask] = copied[mask]

    gap = np.abs(idx[:, None] - idx[None, :])
    new[gap == 1] = adjacent_fare
    new[gap == 0] = 0
    return new.tolist()


def shrink_for_remove(fares: Sequence[Sequence[int]], index: int) -> FareMatrix:
    """index 행/열만 제거, 나머지 요금은 그대로"""
    old = np.asarray(fares, dtype=np.int64)
    return np.delete(np.delete(old, index, axis=0), index, axis=1).tolist()


def build_fare_matrix(size: int, fare_for: Callable[[int, int], int]) -> FareMatrix:
    """대각선을 제외한 모든 (i, j)에 대해 fare_for 호출"""
    return [
        [0 if i == j else int(fare_for(i, j)) for j in range(size)]
        for i in range(size)
    ]


def banded_fare_matrix(
    size: int, bands: Sequence[Tuple[Optional[int], int]]
) -> FareMatrix:
    """
    hop 수 구간별 요금으로 대칭 행렬 생성

    bands: [(최대 hop 수, 요금), ..., (None, 최대 요금)]
    """

    def fare_for(i: int, j: int) -> int:
        hops = abs(i - j)
        for max_hops, fare in bands:
            if max_hops is None or hops <= max_hops:
                return fare
        return bands[-1][1]

    return build_fare_matrix(size, fare_for)


def is_symmetric(fares: Sequence[Sequence[int]]) -> bool:
    matrix = np.asarray(fares)
    return matrix.ndim == 2 and np.array_equal(matrix, matrix.T)
