# greenlight/models/movie.py

from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    Text,
    DateTime,
    JSON,
    CheckConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.sql import func
from greenlight.database import Base


class MovieModel(Base):
    __tablename__ = "movies"
    __table_args__ = (
        CheckConstraint("runtime >= 0", name="movies_runtime_check"),
    )

    # SQLite는 INTEGER PRIMARY KEY만 자동 증가, 배열 타입이 없어 JSON으로 저장
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    title = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    runtime = Column(Integer, nullable=False)
    genres = Column(ARRAY(Text).with_variant(JSON(), "sqlite"), nullable=False)
    version = Column(Integer, nullable=False, server_default=text("1"))

    def __repr__(self):
        return f"<MovieModel(id={self.id}, title='{self.title}', version={self.version})>"
