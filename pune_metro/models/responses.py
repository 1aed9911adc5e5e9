from typing import List, Optional
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


# 경로 계산 응답
class RouteCalculatedResponse(BaseModel):
    origin: str = Field(..., description="출발지")
    destination: str = Field(..., description="목적지")
    reachable: bool = Field(..., description="도달 가능 여부")
    distance: Optional[int] = Field(None, description="총 거리 (도달 불가 시 null)")
    path: List[str] = Field(..., description="최단 경로 (그래프 탐색 결과)")
    display_path: List[str] = Field(..., description="노선을 따르는 안내용 경로")
    total_fare: int = Field(..., description="총 요금")
    transfer_station: Optional[str] = Field(None, description="환승역 (환승 필요 시)")


# 노선 정보 응답
class LineResponse(BaseModel):
    name: str = Field(..., description="노선 이름")
    stations: List[str] = Field(..., description="역 순서")
    distance: int = Field(..., description="거리 가중치")
    fares: List[List[int]] = Field(..., description="요금 행렬")


# 번호가 매겨진 역 (승객 역 선택용)
class NumberedStationResponse(BaseModel):
    number: int = Field(..., description="역 번호 (1부터)")
    name: str = Field(..., description="역 이름")
    line: str = Field(..., description="노선 이름")
    is_interchange: bool = Field(default=False, description="환승역 여부")


class StationListResponse(BaseModel):
    count: int = Field(..., description="역 수")
    interchange: str = Field(..., description="환승역 이름")
    stations: List[NumberedStationResponse] = Field(default_factory=list)


# 관리자 변경 작업 응답
class MutationResponse(BaseModel):
    success: bool = Field(..., description="성공 여부")
    message: str = Field(..., description="결과 메시지")
    persisted: bool = Field(..., description="데이터 파일 저장 여부")
    persistence_error: Optional[str] = Field(None, description="저장 실패 사유")
    line: Optional[LineResponse] = Field(None, description="변경된 노선")

