from fastapi import Depends, HTTPException, Request, status

from pune_metro.core.exceptions import (
    MetroException,
    NOT_FOUND_EXCEPTIONS,
    ForbiddenOperationException,
    InvalidArgumentException,
)
from pune_metro.services.metro_context import MetroContext
from pune_metro.services.pathfinding_service import PathfindingService
from pune_metro.services.topology_service import TopologyService


# lifespan에서 app.state에 등록한 단일 context 사용
def get_context(request: Request) -> MetroContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="노선 데이터가 아직 로드되지 않았습니다",
        )
    return context


def get_pathfinding_service(
    context: MetroContext = Depends(get_context),
) -> PathfindingService:
    return context.pathfinding


def get_topology_service(
    context: MetroContext = Depends(get_context),
) -> TopologyService:
    return context.topology


# MetroException => HTTP status + {message, code}
def to_http_exception(e: MetroException) -> HTTPException:
    if isinstance(e, NOT_FOUND_EXCEPTIONS):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(e, ForbiddenOperationException):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(e, InvalidArgumentException):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(
        status_code=status_code, detail={"message": e.message, "code": e.code}
    )
