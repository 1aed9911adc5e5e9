"""
REST API 엔드포인트 테스트
"""

import pytest
from fastapi.testclient import TestClient

from pune_metro.services.metro_context import create_context


@pytest.fixture
def context(two_line_catalog, data_file):
    return create_context(data_file, catalog=two_line_catalog, interchange_station="X")


@pytest.fixture
def client(context):
    """FastAPI TestClient fixture (테스트용 context 주입)"""
    from pune_metro.main import app

    app.state.context = context
    with TestClient(app) as test_client:
        yield test_client
    app.state.context = None


@pytest.fixture
def default_client(tmp_path):
    """데이터 파일 없음 => lifespan에서 기본 노선도 로드"""
    from pune_metro.main import app

    app.state.context = create_context(tmp_path / "metro_data.txt")
    with TestClient(app) as test_client:
        yield test_client
    app.state.context = None


class TestHealthEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["catalog"]["lines"] == ["a", "b"]


class TestRouteEndpoints:
    """경로 계산 엔드포인트"""

    def test_calculate_route(self, client):
        # When
        response = client.post(
            "/v1/routes/calculate", json={"origin": "P", "destination": "Z"}
        )

        # Then
        assert response.status_code == 200
        data = response.json()
        assert data["path"] == ["P", "X", "Z"]
        assert data["display_path"] == ["P", "Q", "X", "Y", "Z"]
        assert data["total_fare"] == 50
        assert data["transfer_station"] == "X"

    def test_unknown_station_404(self, client):
        response = client.post(
            "/v1/routes/calculate", json={"origin": "P", "destination": "없는역"}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "STATION_NOT_FOUND"

    def test_missing_field_422(self, client):
        response = client.post("/v1/routes/calculate", json={"origin": "P"})

        assert response.status_code == 422

    def test_default_network_route(self, default_client):
        """기본 노선도: purple -> aqua (Civil Court 환승)"""
        response = default_client.post(
            "/v1/routes/calculate", json={"origin": "PCMC", "destination": "Ramwadi"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["path"] == ["PCMC", "Civil Court", "Ramwadi"]
        assert data["distance"] == 3
        assert data["total_fare"] == 60
        assert data["transfer_station"] == "Civil Court"
        assert data["display_path"][0] == "PCMC"
        assert data["display_path"][-1] == "Ramwadi"
        assert data["display_path"].count("Civil Court") == 1
        assert len(data["display_path"]) == 16


class TestStationEndpoints:
    def test_list_stations(self, client):
        response = client.get("/v1/stations")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 6
        assert data["interchange"] == "X"
        assert data["stations"][2] == {
            "number": 3,
            "name": "X",
            "line": "a",
            "is_interchange": True,
        }

    def test_lines(self, client):
        response = client.get("/v1/stations/lines")

        assert response.json() == {
            "lines": {"a": ["P", "Q", "X"], "b": ["X", "Y", "Z"]},
            "total_lines": 2,
        }

    def test_line_detail(self, client):
        response = client.get("/v1/stations/lines/B")

        assert response.status_code == 200
        assert response.json()["fares"] == [[0, 15, 30], [15, 0, 15], [30, 15, 0]]

    def test_line_detail_not_found(self, client):
        response = client.get("/v1/stations/lines/green")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "LINE_NOT_FOUND"

    def test_station_by_number(self, client):
        response = client.get("/v1/stations/5")

        assert response.json() == {"number": 5, "name": "Y", "line": "b"}


class TestAdminEndpoints:
    """관리자 변경 엔드포인트"""

    def test_insert_station(self, client, context):
        response = client.post(
            "/v1/admin/lines/A/stations", json={"station_name": "R", "position": 2}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["persisted"] is True
        assert data["line"]["stations"] == ["P", "R", "Q", "X"]
        assert context.store.load().stations("a") == ["P", "R", "Q", "X"]

    def test_insert_invalid_position_400(self, client):
        response = client.post(
            "/v1/admin/lines/A/stations", json={"station_name": "R", "position": 9}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_ARGUMENT"

    def test_insert_unknown_line_404(self, client):
        response = client.post(
            "/v1/admin/lines/green/stations", json={"station_name": "R", "position": 1}
        )

        assert response.status_code == 404

    def test_remove_interchange_403(self, client, context):
        response = client.delete("/v1/admin/lines/A/stations/X")

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == "FORBIDDEN"
        assert context.catalog.stations("a") == ["P", "Q", "X"]

    def test_remove_station(self, client):
        response = client.delete("/v1/admin/lines/A/stations/Q")

        assert response.status_code == 200
        assert response.json()["line"]["stations"] == ["P", "X"]

    def test_add_line(self, client):
        response = client.post(
            "/v1/admin/lines",
            json={
                "name": "Blue",
                "stations": ["X", "H"],
                "distance": 3,
                "fares": [[0, 20], [20, 0]],
            },
        )

        assert response.status_code == 201
        assert response.json()["line"]["name"] == "blue"

        route = client.post(
            "/v1/routes/calculate", json={"origin": "P", "destination": "H"}
        )
        assert route.json()["path"] == ["P", "X", "H"]

    def test_add_line_duplicate_403(self, client):
        response = client.post(
            "/v1/admin/lines",
            json={"name": "a", "stations": ["M", "N"], "distance": 1, "fares": [[0, 5], [5, 0]]},
        )

        assert response.status_code == 403

    def test_add_line_bad_matrix_400(self, client):
        response = client.post(
            "/v1/admin/lines",
            json={"name": "c", "stations": ["M", "N"], "distance": 1, "fares": [[0, 5]]},
        )

        assert response.status_code == 400

    def test_update_fare_reflected_in_route(self, client):
        response = client.put(
            "/v1/admin/fares", json={"source": "P", "destination": "Q", "fare": 99}
        )
        assert response.status_code == 200

        route = client.post(
            "/v1/routes/calculate", json={"origin": "P", "destination": "Q"}
        )
        assert route.json()["total_fare"] == 99

    def test_update_fare_not_found_404(self, client):
        response = client.put(
            "/v1/admin/fares", json={"source": "P", "destination": "Z", "fare": 10}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "FARE_PAIR_NOT_FOUND"
