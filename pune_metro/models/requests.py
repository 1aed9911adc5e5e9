from typing import List
from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 승객 경로 계산
class RouteRequest(BaseModel):
    origin: str = Field(..., min_length=1, description="출발지 역 이름")
    destination: str = Field(..., min_length=1, description="목적지 역 이름")


# 관리자: 기존 노선에 역 추가
class InsertStationRequest(BaseModel):
    station_name: str = Field(..., min_length=1, description="추가할 역 이름")
    position: int = Field(..., description="삽입 위치 (1부터 시작, 해당 위치 앞에 삽입)")


# 관리자: 신규 노선 추가
class AddLineRequest(BaseModel):
    name: str = Field(..., min_length=1, description="노선 이름")
    stations: List[str] = Field(..., description="노선 순서대로의 역 이름")
    distance: int = Field(..., description="1 hop 당 거리 가중치")
    fares: List[List[int]] = Field(..., description="n x n 요금 행렬 (대각선은 무시)")


# 관리자: 요금 변경
class UpdateFareRequest(BaseModel):
    source: str = Field(..., min_length=1, description="출발 역 이름")
    destination: str = Field(..., min_length=1, description="도착 역 이름")
    fare: int = Field(..., description="새 요금")
