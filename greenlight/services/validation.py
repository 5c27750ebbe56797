# greenlight/services/validation.py

from datetime import datetime
from typing import Dict, Optional
from greenlight.schemas.filters import Filters
from greenlight.schemas.movie import Movie
from greenlight.validator import Validator, permitted_value, unique

MIN_MOVIE_YEAR = 1888
MAX_TITLE_BYTES = 500
MAX_GENRES = 5
MAX_RUNTIME = 2**31 - 1


def validate_movie(v: Validator, movie: Movie, now: Optional[datetime] = None) -> Dict[str, str]:
    """영화 필드 검증

    모든 규칙을 끝까지 평가해 v에 기록하고 에러 목록을 반환한다.
    연도 상한은 호출 시점(now, 기본값은 현재 시각)의 연도다.
    """
    current_year = (now or datetime.now()).year

    v.check(movie.title != "", "title", "must be provided")
    v.check(len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES, "title", "must not be more than 500 bytes long")

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= MIN_MOVIE_YEAR, "year", "must be greater than 1888")
    v.check(movie.year <= current_year, "year", "must not be in the future")

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")
    v.check(movie.runtime <= MAX_RUNTIME, "runtime", "must not be more than 2147483647")

    genres = movie.genres
    v.check(genres is not None, "genres", "must be provided")
    v.check(len(genres or []) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(genres or []) <= MAX_GENRES, "genres", "must not contain more than 5 genres")
    v.check(unique(genres), "genres", "must not contain duplicate values")

    return v.errors


def validate_filters(v: Validator, filters: Filters) -> Dict[str, str]:
    v.check(filters.page > 0, "page", "must be greater than zero")
    v.check(filters.page <= 10_000_000, "page", "must be a maximum of 10 million")
    v.check(filters.page_size > 0, "page_size", "must be greater than zero")
    v.check(filters.page_size <= 100, "page_size", "must be a maximum of 100")
    v.check(permitted_value(filters.sort, filters.sort_safelist), "sort", "invalid sort value")
    return v.errors
