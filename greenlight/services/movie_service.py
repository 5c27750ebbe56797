# greenlight/services/movie_service.py

import logging
from contextlib import contextmanager
from typing import List, Optional, Tuple
from sqlalchemy import select, insert, update, delete, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from greenlight.core.exceptions import (
    EditConflictError,
    FailedValidationError,
    RecordNotFoundError,
)
from greenlight.models.movie import MovieModel
from greenlight.schemas.filters import Filters, Metadata
from greenlight.schemas.movie import Movie
from greenlight.services.validation import validate_movie
from greenlight.validator import Validator

logger = logging.getLogger(__name__)

# BIGINT 범위
MAX_ID = 2**63 - 1


class MovieService:
    """movies 테이블 저장소

    모든 작업은 SQL 문 하나로 처리한다. 드라이버 에러는 롤백 후 그대로 다시 던지고,
    "행 없음"만 RecordNotFoundError / EditConflictError로 바꾼다.
    """

    def __init__(self, db: Session, timeout: Optional[float] = None):
        self.db = db
        self.timeout = timeout

    def insert(self, movie: Movie) -> Movie:
        """영화 생성, id/created_at/version을 movie에 채워서 반환"""
        self._ensure_valid(movie)

        stmt = (
            insert(MovieModel)
            .values(
                title=movie.title,
                year=movie.year,
                runtime=movie.runtime,
                genres=list(movie.genres),
            )
            .returning(MovieModel.id, MovieModel.created_at, MovieModel.version)
        )
        with self._transaction("영화 생성"):
            row = self.db.execute(stmt).one()

        movie.id = row.id
        movie.created_at = row.created_at
        movie.version = row.version
        logger.info("영화 생성: id=%s title=%s", movie.id, movie.title)
        return movie

    def get(self, movie_id: int) -> Movie:
        """ID로 영화 조회"""
        if not 1 <= movie_id <= MAX_ID:
            raise RecordNotFoundError()

        stmt = (
            select(MovieModel)
            .where(MovieModel.id == movie_id)
            .execution_options(populate_existing=True)
        )
        with self._transaction("영화 조회"):
            movie_model = self.db.execute(stmt).scalar_one_or_none()
            movie = Movie.model_validate(movie_model) if movie_model else None

        if movie is None:
            raise RecordNotFoundError()
        return movie

    def update(self, movie: Movie) -> Movie:
        """버전이 일치할 때만 수정하고 version을 1 올린다"""
        if not 1 <= movie.id <= MAX_ID:
            raise RecordNotFoundError()
        self._ensure_valid(movie)

        stmt = (
            update(MovieModel)
            .where(MovieModel.id == movie.id, MovieModel.version == movie.version)
            .values(
                title=movie.title,
                year=movie.year,
                runtime=movie.runtime,
                genres=list(movie.genres),
                version=MovieModel.version + 1,
            )
            .returning(MovieModel.version)
            .execution_options(synchronize_session=False)
        )
        with self._transaction("영화 수정"):
            new_version = self.db.execute(stmt).scalar_one_or_none()

        if new_version is None:
            logger.warning("영화 수정 충돌: id=%s version=%s", movie.id, movie.version)
            raise EditConflictError()

        movie.version = new_version
        logger.info("영화 수정: id=%s version=%s", movie.id, movie.version)
        return movie

    def delete(self, movie_id: int) -> None:
        """영화 삭제"""
        if not 1 <= movie_id <= MAX_ID:
            raise RecordNotFoundError()

        stmt = (
            delete(MovieModel)
            .where(MovieModel.id == movie_id)
            .execution_options(synchronize_session=False)
        )
        with self._transaction("영화 삭제"):
            rows_affected = self.db.execute(stmt).rowcount

        if rows_affected == 0:
            raise RecordNotFoundError()
        logger.info("영화 삭제: id=%s", movie_id)

    def get_all(
        self, title: str, genres: List[str], filters: Filters
    ) -> Tuple[List[Movie], Metadata]:
        """제목/장르 필터, 정렬, 페이지 적용 목록 조회"""
        stmt = self._build_list_query(title, genres, filters)
        with self._transaction("영화 목록 조회"):
            rows = self.db.execute(stmt).all()
            movies = [Movie.model_validate(row.MovieModel) for row in rows]

        total_records = rows[0].total_records if rows else 0
        metadata = Metadata.calculate(total_records, filters.page, filters.page_size)
        return movies, metadata

    # 헬퍼 메서드들
    def _build_list_query(self, title: str, genres: List[str], filters: Filters):
        sort_column = getattr(MovieModel, filters.sort_column())
        order = sort_column.desc() if filters.sort_descending() else sort_column.asc()

        stmt = select(MovieModel, func.count().over().label("total_records"))
        if title:
            stmt = stmt.where(MovieModel.title.icontains(title, autoescape=True))
        if genres:
            stmt = stmt.where(*self._genre_conditions(genres))

        return (
            stmt.order_by(order, MovieModel.id.asc())
            .limit(filters.limit())
            .offset(filters.offset())
            .execution_options(populate_existing=True)
        )

    def _genre_conditions(self, genres: List[str]) -> list:
        """요청한 장르를 모두 포함하는 조건

        PostgreSQL은 배열 포함(genres @> :genres), SQLite는 JSON 배열을
        json_each로 펼쳐 장르마다 EXISTS 조건을 만든다.
        """
        if self.db.get_bind().dialect.name != "sqlite":
            return [MovieModel.genres.contains(genres)]

        conditions = []
        for genre in genres:
            elements = func.json_each(MovieModel.genres).table_valued("value")
            conditions.append(select(elements.c.value).where(elements.c.value == genre).exists())
        return conditions

    def _ensure_valid(self, movie: Movie) -> None:
        v = Validator()
        if validate_movie(v, movie):
            raise FailedValidationError(v.errors)

    def _apply_timeout(self) -> None:
        """PostgreSQL이면 현재 트랜잭션에 statement_timeout 설정"""
        if not self.timeout or self.db.get_bind().dialect.name != "postgresql":
            return
        self.db.execute(text(f"SET LOCAL statement_timeout = {int(self.timeout * 1000)}"))

    @contextmanager
    def _transaction(self, action: str):
        try:
            self._apply_timeout()
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("%s 실패", action)
            raise
