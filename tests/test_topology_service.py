"""
TopologyService 테스트 (역 추가/삭제, 노선 추가, 요금 변경)
"""

import pytest

from pune_metro.core.config import MAX_FARE
from pune_metro.core.exceptions import (
    FarePairNotFoundException,
    ForbiddenOperationException,
    InvalidArgumentException,
    LineNotFoundException,
    PersistenceException,
    StationNotFoundException,
)
from pune_metro.db.record_store import RecordStore
from pune_metro.services.topology_service import (
    TopologyService,
    fare_builder_from_matrix,
)


class TestInsertStation:
    """역 추가 테스트"""

    def test_insert_scenario(self, topology_service, two_line_catalog, assert_fare_matrix):
        """A=[P,Q,X] 2번째 위치에 R => [P,R,Q,X], 4x4 행렬"""
        result = topology_service.insert_station("A", "R", 2)

        assert result.success
        assert two_line_catalog.stations("a") == ["P", "R", "Q", "X"]
        assert_fare_matrix(two_line_catalog.fares("a"), 4)

    @pytest.mark.parametrize("position", [1, 2, 3, 4])
    def test_every_valid_position(self, topology_service, two_line_catalog, assert_fare_matrix, position):
        topology_service.insert_station("A", "R", position)

        stations = two_line_catalog.stations("a")
        assert len(stations) == 4
        assert stations[position - 1] == "R"
        assert_fare_matrix(two_line_catalog.fares("a"), 4)

    @pytest.mark.parametrize("position", [0, 5, -1])
    def test_invalid_position(self, topology_service, two_line_catalog, position):
        with pytest.raises(InvalidArgumentException):
            topology_service.insert_station("A", "R", position)

        assert two_line_catalog.stations("a") == ["P", "Q", "X"]

    def test_unknown_line(self, topology_service):
        with pytest.raises(LineNotFoundException):
            topology_service.insert_station("green", "R", 1)

    def test_duplicate_station_name(self, topology_service):
        """다른 노선에 이미 있는 역 이름 거부"""
        with pytest.raises(InvalidArgumentException):
            topology_service.insert_station("A", "Y", 1)

    def test_blank_station_name(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.insert_station("A", "   ", 1)

    @pytest.mark.parametrize("name", ["R\nS", "R\rS", "R\u2028S"])
    def test_line_break_in_station_name(self, topology_service, two_line_catalog, record_store, name):
        """줄바꿈이 들어간 역 이름 => 저장된 파일을 다시 읽을 수 없으므로 거부"""
        with pytest.raises(InvalidArgumentException):
            topology_service.insert_station("A", name, 2)

        assert two_line_catalog.stations("a") == ["P", "Q", "X"]
        assert not record_store.exists()

    def test_insert_persists_catalog(self, topology_service, record_store):
        result = topology_service.insert_station("A", "R", 2)

        assert result.persisted
        assert record_store.load().stations("a") == ["P", "R", "Q", "X"]


class TestRemoveStation:
    """역 삭제 테스트"""

    def test_remove_station(self, topology_service, two_line_catalog):
        result = topology_service.remove_station("B", "Y")

        assert result.success
        assert two_line_catalog.stations("b") == ["X", "Z"]
        assert two_line_catalog.fares("b") == [[0, 30], [30, 0]]

    def test_interchange_is_forbidden(self, topology_service, two_line_catalog):
        """환승역 삭제 => Forbidden, 카탈로그 변경 없음"""
        before = two_line_catalog.to_dict()

        for line_name in ("A", "B"):
            with pytest.raises(ForbiddenOperationException):
                topology_service.remove_station(line_name, "X")

        assert two_line_catalog.to_dict() == before

    def test_line_with_two_stations_refused(self, topology_service, two_line_catalog):
        topology_service.remove_station("B", "Y")

        with pytest.raises(ForbiddenOperationException):
            topology_service.remove_station("B", "Z")

        assert two_line_catalog.stations("b") == ["X", "Z"]

    def test_station_not_on_line(self, topology_service):
        with pytest.raises(StationNotFoundException):
            topology_service.remove_station("A", "Z")

    def test_unknown_line(self, topology_service):
        with pytest.raises(LineNotFoundException):
            topology_service.remove_station("green", "P")

    def test_insert_then_remove_restores_order(self, topology_service, two_line_catalog, assert_fare_matrix):
        topology_service.insert_station("A", "R", 2)
        topology_service.remove_station("A", "R")

        assert two_line_catalog.stations("a") == ["P", "Q", "X"]
        assert_fare_matrix(two_line_catalog.fares("a"), 3)


class TestAddLine:
    """노선 추가 테스트"""

    def test_add_line(self, topology_service, two_line_catalog, record_store):
        result = topology_service.add_line(
            "C", ["X", "M", "N"], 2, fare_builder_from_matrix([[0, 5, 9], [5, 0, 5], [9, 5, 0]])
        )

        assert result.success
        assert result.persisted
        assert two_line_catalog.line_names() == ["a", "b", "c"]
        assert two_line_catalog.fares("c")[0][2] == 9
        assert record_store.load().line_names() == ["a", "b", "c"]

    def test_builder_called_for_off_diagonal_pairs(self, topology_service, two_line_catalog):
        calls = []

        def builder(i, j):
            calls.append((i, j))
            return 10 * abs(i - j)

        topology_service.add_line("c", ["M", "N", "O"], 1, builder)

        assert sorted(calls) == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]
        assert two_line_catalog.fares("c") == [[0, 10, 20], [10, 0, 10], [20, 10, 0]]

    def test_duplicate_name_forbidden(self, topology_service):
        with pytest.raises(ForbiddenOperationException):
            topology_service.add_line("a", ["M", "N"], 1, lambda i, j: 5)

    def test_empty_station_list(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", [], 1, lambda i, j: 5)

    def test_non_positive_distance(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", ["M", "N"], 0, lambda i, j: 5)

    def test_asymmetric_fares_rejected(self, topology_service, two_line_catalog):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", ["M", "N"], 1, fare_builder_from_matrix([[0, 5], [6, 0]]))

        assert "c" not in two_line_catalog

    def test_matrix_size_mismatch(self):
        with pytest.raises(InvalidArgumentException):
            fare_builder_from_matrix([[0, 5], [5, 0]], size=3)

    def test_station_used_on_other_line(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", ["P", "M"], 1, lambda i, j: 5)

    def test_line_break_in_line_name(self, topology_service, two_line_catalog):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c\nd", ["X", "M"], 1, lambda i, j: 5)

        assert two_line_catalog.line_names() == ["a", "b"]

    def test_line_break_in_new_line_station(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", ["X", "M\nN"], 1, lambda i, j: 5)

    def test_fare_above_limit_rejected(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.add_line("c", ["M", "N"], 1, lambda i, j: 2**63)

    def test_saved_line_reloads(self, topology_service, record_store):
        """추가한 노선이 다음 시작 시에도 그대로 로드됨"""
        topology_service.add_line("c", ["X", "M"], 1, lambda i, j: 5)

        reloaded = record_store.load_or_default()

        assert reloaded.line_names() == ["a", "b", "c"]
        assert reloaded.stations("c") == ["X", "M"]


class TestUpdateFare:
    """요금 변경 테스트"""

    def test_update_fare_symmetric(self, topology_service, two_line_catalog):
        result = topology_service.update_fare("P", "Q", 99)

        assert result.success
        fares = two_line_catalog.fares("a")
        assert fares[0][1] == fares[1][0] == 99

    def test_first_line_containing_both(self, topology_service, two_line_catalog):
        """X는 두 노선 모두에 있음 => Y를 포함한 B 노선 요금 변경"""
        topology_service.update_fare("Y", "X", 42)

        assert two_line_catalog.fares("b")[0][1] == 42
        assert two_line_catalog.fares("a") == [[0, 10, 20], [10, 0, 10], [20, 10, 0]]

    def test_stations_not_on_same_line(self, topology_service):
        with pytest.raises(FarePairNotFoundException):
            topology_service.update_fare("P", "Z", 50)

    def test_negative_fare(self, topology_service):
        with pytest.raises(InvalidArgumentException):
            topology_service.update_fare("P", "Q", -1)

    def test_fare_above_limit_rejected(self, topology_service, two_line_catalog):
        """int64 범위를 넘는 요금 => 이후 역 추가 시 행렬 재구성 불가"""
        with pytest.raises(InvalidArgumentException):
            topology_service.update_fare("P", "X", 2**63)

        assert two_line_catalog.fares("a")[0][2] == 20
        topology_service.insert_station("A", "R", 2)
        assert len(two_line_catalog.fares("a")) == 4

    def test_fare_at_limit_accepted(self, topology_service, two_line_catalog):
        topology_service.update_fare("P", "X", MAX_FARE)

        assert two_line_catalog.fares("a")[2][0] == MAX_FARE


class TestPersistenceFailure:
    """저장 실패 => 메모리 변경 유지 + 실패 사유 보고"""

    def test_mutation_stands_when_save_fails(self, two_line_catalog, tmp_path):
        service = TopologyService(
            two_line_catalog,
            RecordStore(tmp_path / "missing_dir" / "metro_data.txt"),
            interchange_station="X",
        )

        result = service.update_fare("P", "Q", 77)

        assert result.success
        assert not result.persisted
        assert result.persistence_error
        assert two_line_catalog.fares("a")[0][1] == 77

    def test_save_error_reported(self, topology_service, two_line_catalog, mocker):
        mocker.patch.object(
            RecordStore, "save", side_effect=PersistenceException("디스크 가득 참")
        )

        result = topology_service.insert_station("B", "W", 4)

        assert result.success
        assert result.persisted is False
        assert "디스크 가득 참" in result.persistence_error
        assert two_line_catalog.stations("b") == ["X", "Y", "Z", "W"]

    def test_failed_validation_does_not_write(self, topology_service, record_store):
        with pytest.raises(ForbiddenOperationException):
            topology_service.remove_station("A", "X")

        assert not record_store.exists()
