"""
Pytest 설정 및 공통 Fixture
"""

import os
import sys
from pathlib import Path

import pytest

# 테스트 모드 환경 변수 설정 (모듈 임포트 전에 설정해야 함)
os.environ.setdefault("ENABLE_ROUTE_METRICS", "false")

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pune_metro.db.catalog import LineCatalog  # noqa: E402
from pune_metro.db.record_store import RecordStore  # noqa: E402
from pune_metro.models.domain import Line  # noqa: E402
from pune_metro.services.pathfinding_service import PathfindingService  # noqa: E402
from pune_metro.services.topology_service import TopologyService  # noqa: E402

INTERCHANGE = "X"


@pytest.fixture
def interchange():
    return INTERCHANGE


@pytest.fixture
def two_line_catalog():
    """
    테스트용 2개 노선
    A = [P, Q, X] (hop 당 10), B = [X, Y, Z] (hop 당 15), 환승역 X
    """
    return LineCatalog(
        [
            Line(
                name="A",
                stations=["P", "Q", "X"],
                distance=1,
                fares=[[0, 10, 20], [10, 0, 10], [20, 10, 0]],
            ),
            Line(
                name="B",
                stations=["X", "Y", "Z"],
                distance=1,
                fares=[[0, 15, 30], [15, 0, 15], [30, 15, 0]],
            ),
        ]
    )


@pytest.fixture
def data_file(tmp_path):
    """임시 데이터 파일 경로 (생성하지 않음)"""
    return tmp_path / "metro_data.txt"


@pytest.fixture
def record_store(data_file):
    return RecordStore(data_file)


@pytest.fixture
def pathfinding_service(two_line_catalog):
    return PathfindingService(
        two_line_catalog, interchange_station=INTERCHANGE, enable_metrics=False
    )


@pytest.fixture
def topology_service(two_line_catalog, record_store):
    return TopologyService(
        two_line_catalog,
        record_store,
        interchange_station=INTERCHANGE,
        adjacent_fare=10,
        fallback_fare=25,
    )


@pytest.fixture
def assert_fare_matrix():
    """요금 행렬 불변식 검사 함수"""
    return _assert_valid_fare_matrix


def _assert_valid_fare_matrix(fares, size):
    """정사각, 대칭, 대각선 0"""
    assert len(fares) == size
    for i in range(size):
        assert len(fares[i]) == size
        assert fares[i][i] == 0
        for j in range(size):
            assert fares[i][j] == fares[j][i]
