import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Pune Metro Route Planner"
    VERSION: str = "1.2.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # 노선 데이터 파일 (텍스트 레코드 포맷)
    DATA_FILE: str = os.getenv("DATA_FILE", "metro_data.txt")

    # 노선 간 환승이 가능한 유일한 역
    INTERCHANGE_STATION: str = os.getenv("INTERCHANGE_STATION", "Civil Court")

    # 역 추가 시 요금 행렬 재계산 상수
    # 인접 역 => ADJACENT_FARE, 기존 값이 없는 경우 => FALLBACK_FARE
    ADJACENT_FARE: int = int(os.getenv("ADJACENT_FARE", 10))
    FALLBACK_FARE: int = int(os.getenv("FALLBACK_FARE", 25))

    # 경로 계산 메트릭 로깅 활성화 플래그
    ENABLE_ROUTE_METRICS: bool = (
        os.getenv("ENABLE_ROUTE_METRICS", "true").lower() == "true"
    )

    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")

    @property
    def FARE_CONFIG(self) -> Dict[str, Any]:
        return {
            "adjacent_fare": self.ADJACENT_FARE,
            "fallback_fare": self.FALLBACK_FARE,
        }


settings = Settings()  # 모듈화


# 기본 노선도 (데이터 파일이 없거나 손상된 경우)
DEFAULT_LINE_STATIONS = {
    "purple": [
        "PCMC",
        "Sant Tukaram Nagar",
        "Bhosari",
        "Kasarwadi",
        "Phugewadi",
        "Dapodi",
        "Bopodi",
        "Shivaji Nagar",
        "Civil Court",
        "Kasba Peth (Budhwar Peth)",
        "Mandal",
        "Swargate",
    ],
    "aqua": [
        "Vanaz",
        "Anand Nagar",
        "Ideal Colony",
        "Nal Stop",
        "Garware College",
        "Deccan Gymkhana",
        "Chhatrapati Sambhaji Udyan",
        "PMC",
        "Civil Court",
        "Mangalwar Peth",
        "Pune Railway Station",
        "Ruby Hall Clinic",
        "Bund Garden",
        "Yerwada",
        "Kalyani Nagar",
        "Ramwadi",
    ],
}

# 노선별 거리 가중치 (역 간 1 hop 당)
DEFAULT_LINE_DISTANCES = {
    "purple": 1,
    "aqua": 2,
}

# 노선별 요금 구간 (hop 수 상한, 요금) => 마지막 구간 이후는 최대 요금
DEFAULT_FARE_BANDS = {
    "purple": [(1, 10), (2, 15), (4, 20), (6, 25), (None, 30)],
    "aqua": [(1, 10), (2, 20), (7, 30), (None, 35)],
}

# 요금 상한 (요금 행렬은 int64로 재구성됨)
MAX_FARE = 1_000_000
