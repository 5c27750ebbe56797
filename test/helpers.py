import os

# 테스트는 메모리 SQLite만 사용
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("DB_QUERY_TIMEOUT", "0")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from greenlight.database import Base
from greenlight.models import MovieModel  # noqa: F401
from greenlight.schemas.movie import Movie


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_movie(**overrides) -> Movie:
    data = {
        "title": "Moana",
        "year": 2016,
        "runtime": 107,
        "genres": ["animation", "adventure"],
    }
    data.update(overrides)
    return Movie(**data)
