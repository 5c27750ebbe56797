# greenlight/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from greenlight.core.config import get_settings
from greenlight.core.logging_config import setup_logging
from greenlight.api.v1 import api_router
from greenlight.database import engine, Base

# 설정 로드
settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시
    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("데이터베이스 테이블 준비 완료")
    logger.info("서버 시작: env=%s version=%s", settings.environment, settings.version)

    yield

    # 종료 시
    engine.dispose()
    logger.info("서버 종료")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="Movie catalogue JSON API",
    version=settings.version,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS 미들웨어
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API v1 라우터 등록
app.include_router(api_router, prefix="/v1")


@app.get("/")
def read_root():
    """서비스 루트"""
    return {
        "service": settings.app_name,
        "description": "Movie catalogue JSON API",
        "version": settings.version,
        "docs": "/docs",
    }

# uvicorn greenlight.main:app --reload
