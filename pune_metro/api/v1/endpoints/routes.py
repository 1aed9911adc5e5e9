"""
승객 경로 계산 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from pune_metro.api.deps import get_pathfinding_service, to_http_exception
from pune_metro.core.exceptions import MetroException
from pune_metro.models.requests import RouteRequest
from pune_metro.models.responses import RouteCalculatedResponse
from pune_metro.services.pathfinding_service import PathfindingService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=RouteCalculatedResponse)
async def calculate_route(
    request: RouteRequest,
    service: PathfindingService = Depends(get_pathfinding_service),
):
    """
    경로 계산

    매 요청마다 현재 노선도로 그래프를 다시 만들어 최단 경로와 요금을 계산한다.

    - **origin**: 출발지 역 이름
    - **destination**: 목적지 역 이름

    Returns:
        최단 경로, 안내용 경로, 총 요금, 환승역

    Example:
        POST /v1/routes/calculate
        {
            "origin": "PCMC",
            "destination": "Ramwadi"
        }
    """
    try:
        logger.info(f"REST 경로 계산: {request.origin} → {request.destination}")
        return service.calculate_route(request.origin, request.destination)

    except MetroException as e:
        logger.error(f"경로 계산 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"경로 계산 중 오류 발생: {str(e)}")
