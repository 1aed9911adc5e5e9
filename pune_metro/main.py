"""
Pune Metro Route Planner - FastAPI Application

노선도(역, 노선별 거리 가중치, 역 간 요금) 기반 최단 경로 및 요금 안내
관리자 노선 변경 (역 추가/삭제, 노선 추가, 요금 변경) + 데이터 파일 저장
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pune_metro.core.config import settings
from pune_metro.services.metro_context import create_context
from pune_metro.api.v1.router import api_router

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 데이터 파일에서 노선도 로드 (없거나 손상 => 기본 노선도)
    - 경로/노선 변경 서비스가 공유하는 MetroContext 생성
    """
    # ========== Startup ==========
    logger.info("=" * 60)
    logger.info("Pune Metro Route Planner 시작 중...")
    logger.info("=" * 60)

    try:
        # 테스트 등에서 미리 주입한 context가 있으면 그대로 사용
        if getattr(app.state, "context", None) is None:
            app.state.context = create_context(settings.DATA_FILE)

        logger.info("=" * 60)
        logger.info("Pune Metro Route Planner 시작 완료!")
        logger.info("=" * 60)

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    # application 실행 <- yield로 제어 반환
    yield

    # ========== Shutdown ==========
    logger.info("✓ Pune Metro Route Planner 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## Pune Metro 경로 안내

    ### 주요 기능
    - 🚇 최단 경로 및 총 요금 계산 (Dijkstra)
    - 🔄 Civil Court 환승 안내
    - 🛠️ 관리자 노선 변경 (역 추가/삭제, 노선 추가, 요금 변경)
    - 💾 변경 시 데이터 파일 자동 저장
    """,
    lifespan=lifespan,  # 생명주기 관리자 등록
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "features": [
            "최단 경로 및 요금 계산",
            "환승 안내",
            "관리자 노선 변경",
        ],
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    - 노선도 로드 여부
    - 데이터 파일 존재 여부
    """
    context = getattr(app.state, "context", None)
    if context is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "version": settings.VERSION},
        )

    return {
        "status": "healthy",
        "version": settings.VERSION,
        "components": {
            "catalog": {
                "lines": context.catalog.line_names(),
                "stations": len(context.catalog.all_stations()),
            },
            "data_file": {
                "path": str(context.store.path),
                "exists": context.store.exists(),
            },
        },
    }


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "pune_metro.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
        # 노선도는 프로세스 단위 상태 => 단일 worker
        workers=1,
    )
