# greenlight/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from greenlight.core.config import get_settings

settings = get_settings()


def build_engine(database_url: str, **overrides):
    """설정값으로 엔진 생성"""
    options = {
        "echo": settings.db_echo,  # SQL 로그 출력
        "pool_pre_ping": True,  # 연결 상태 확인
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=settings.db_pool_recycle,  # 유휴 커넥션 재사용 주기
        )
    options.update(overrides)
    return create_engine(database_url, **options)


# 엔진 생성 (실제 연결은 첫 쿼리 시점)
engine = build_engine(settings.database_url)

# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base 클래스 생성
Base = declarative_base()


# 의존성 주입용 함수
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
