"""
pydantic models for 요청, 응답, 도메인 객체
"""


from pune_metro.models.requests import (
    RouteRequest,
    InsertStationRequest,
    AddLineRequest,
    UpdateFareRequest,
)
from pune_metro.models.responses import (
    RouteCalculatedResponse,
    LineResponse,
    StationListResponse,
    MutationResponse,
)
from pune_metro.models.domain import Line, RouteResult, MutationResult, NumberedStation

__all__ = [
    "RouteRequest",
    "InsertStationRequest",
    "AddLineRequest",
    "UpdateFareRequest",
    "RouteCalculatedResponse",
    "LineResponse",
    "StationListResponse",
    "MutationResponse",
    "Line",
    "RouteResult",
    "MutationResult",
    "NumberedStation",
]
