# greenlight/api/v1/system.py

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from greenlight.core.config import get_settings
from greenlight.database import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/healthcheck")
def health_check():
    """서비스 헬스체크"""
    settings = get_settings()
    return {
        "status": "available",
        "system_info": {
            "environment": settings.environment,
            "version": settings.version,
        },
    }


@router.get("/healthcheck/db")
def db_health_check(db: Session = Depends(get_db)):
    """데이터베이스 연결 확인"""
    try:
        result = db.execute(text("SELECT 1"))
        return {"status": "available", "result": result.scalar_one()}
    except SQLAlchemyError as e:
        logger.error("DB 연결 실패: %s", e)
        raise HTTPException(status_code=503, detail="database unavailable")
