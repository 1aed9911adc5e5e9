"""
역/노선 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Path
import logging

from pune_metro.api.deps import get_context, to_http_exception
from pune_metro.core.exceptions import MetroException
from pune_metro.models.responses import LineResponse, StationListResponse
from pune_metro.services.metro_context import MetroContext

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=StationListResponse)
async def list_stations(context: MetroContext = Depends(get_context)):
    """
    전체 역 목록 (노선 순서대로 1부터 번호)

    환승역은 속한 노선마다 한 번씩 나온다.
    """
    service = context.pathfinding
    stations = service.list_stations()
    return {
        "count": len(stations),
        "interchange": service.interchange_station,
        "stations": [vars(s) for s in stations],
    }


@router.get("/lines")
async def get_all_lines(context: MetroContext = Depends(get_context)):
    """
    전체 노선 목록 조회

    Returns:
        {
            "purple": ["PCMC", "Sant Tukaram Nagar", ...],
            "aqua": ["Vanaz", "Anand Nagar", ...],
        }
    """
    lines = {line.name: list(line.stations) for line in context.catalog}
    return {"lines": lines, "total_lines": len(lines)}


@router.get("/lines/{line_name}", response_model=LineResponse)
async def get_line(line_name: str, context: MetroContext = Depends(get_context)):
    """노선 상세 (역 순서, 거리 가중치, 요금 행렬)"""
    try:
        line = context.catalog.get_line(line_name)
    except MetroException as e:
        logger.warning(f"노선 조회 실패: {e.message}")
        raise to_http_exception(e)

    return {
        "name": line.name,
        "stations": line.stations,
        "distance": line.distance,
        "fares": line.fares,
    }


@router.get("/{number}")
async def get_station_by_number(
    number: int = Path(..., ge=1, description="역 번호"),
    context: MetroContext = Depends(get_context),
):
    """역 번호 => 역 이름"""
    try:
        name = context.pathfinding.station_by_number(number)
    except MetroException as e:
        raise to_http_exception(e)

    return {
        "number": number,
        "name": name,
        "line": context.catalog.find_line(name),
    }
