"""
관리자 노선 변경 REST API 엔드포인트

모든 변경은 성공 시 전체 노선도를 데이터 파일에 다시 저장한다.
저장 실패는 200 응답의 persisted=false, persistence_error로 전달 (메모리 변경은 유지)
"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from pune_metro.api.deps import get_topology_service, to_http_exception
from pune_metro.core.exceptions import MetroException
from pune_metro.models.domain import MutationResult
from pune_metro.models.requests import (
    AddLineRequest,
    InsertStationRequest,
    UpdateFareRequest,
)
from pune_metro.models.responses import MutationResponse
from pune_metro.services.topology_service import (
    TopologyService,
    fare_builder_from_matrix,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_response(result: MutationResult) -> dict:
    line = result.line
    return {
        "success": result.success,
        "message": result.message,
        "persisted": result.persisted,
        "persistence_error": result.persistence_error,
        "line": (
            {
                "name": line.name,
                "stations": line.stations,
                "distance": line.distance,
                "fares": line.fares,
            }
            if line
            else None
        ),
    }


def _run(action: str, operation, *args) -> dict:
    try:
        result = operation(*args)
    except MetroException as e:
        logger.warning(f"{action} 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"{action} 중 예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"{action} 중 오류 발생: {str(e)}")

    if not result.persisted:
        logger.error(f"{action} 반영 완료, 저장 실패: {result.persistence_error}")
    return _to_response(result)


@router.post("/lines/{line_name}/stations", response_model=MutationResponse)
async def insert_station(
    line_name: str,
    request: InsertStationRequest,
    service: TopologyService = Depends(get_topology_service),
):
    """
    노선에 역 추가

    - **station_name**: 추가할 역 이름
    - **position**: 1 ~ (역 수 + 1), 해당 위치 앞에 삽입
    """
    return _run(
        "역 추가",
        service.insert_station,
        line_name,
        request.station_name,
        request.position,
    )


@router.delete(
    "/lines/{line_name}/stations/{station_name}", response_model=MutationResponse
)
async def remove_station(
    line_name: str,
    station_name: str,
    service: TopologyService = Depends(get_topology_service),
):
    """노선에서 역 삭제 (환승역, 역 2개 이하 노선은 403)"""
    return _run("역 삭제", service.remove_station, line_name, station_name)


@router.post("/lines", response_model=MutationResponse, status_code=201)
async def add_line(
    request: AddLineRequest,
    service: TopologyService = Depends(get_topology_service),
):
    """
    신규 노선 추가

    Example:
        POST /v1/admin/lines
        {
            "name": "blue",
            "stations": ["Civil Court", "Hinjewadi"],
            "distance": 3,
            "fares": [[0, 20], [20, 0]]
        }
    """

    def add(request: AddLineRequest):
        builder = fare_builder_from_matrix(request.fares, size=len(request.stations))
        return service.add_line(
            request.name, request.stations, request.distance, builder
        )

    return _run("노선 추가", add, request)


@router.put("/fares", response_model=MutationResponse)
async def update_fare(
    request: UpdateFareRequest,
    service: TopologyService = Depends(get_topology_service),
):
    """두 역이 함께 있는 첫 번째 노선의 요금 변경 (대칭)"""
    return _run(
        "요금 변경",
        service.update_fare,
        request.source,
        request.destination,
        request.fare,
    )
