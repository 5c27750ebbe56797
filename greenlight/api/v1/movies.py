# greenlight/api/v1/movies.py

from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException, Path, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from greenlight.core.config import get_settings
from greenlight.core.exceptions import (
    EditConflictError,
    FailedValidationError,
    RecordNotFoundError,
)
from greenlight.database import get_db
from greenlight.schemas.filters import Filters
from greenlight.schemas.movie import (
    MovieCreate,
    MovieEnvelope,
    MovieListEnvelope,
    MovieResponse,
    MovieUpdate,
)
from greenlight.services.movie_service import MovieService
from greenlight.services.validation import validate_filters, validate_movie
from greenlight.validator import Validator

router = APIRouter()

SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    settings = get_settings()
    return MovieService(db, timeout=settings.db_query_timeout)


def _not_found(e: RecordNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _failed_validation(errors) -> HTTPException:
    return HTTPException(status_code=422, detail=errors)


def _server_error() -> HTTPException:
    # 원인은 MovieService에서 트레이스백과 함께 기록한다
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR_MESSAGE
    )


@router.get(
    "",
    response_model=MovieListEnvelope,
    summary="영화 목록",
    description="제목/장르로 필터링하고 정렬, 페이지 단위로 영화 목록을 조회합니다.",
)
def list_movies(
    title: str = Query(default="", description="제목 검색어"),
    genres: str = Query(default="", description="장르 (쉼표로 구분)"),
    page: int = Query(default=1, description="페이지 번호"),
    page_size: int = Query(default=20, description="페이지 크기"),
    sort: str = Query(default="id", description="정렬 기준 (id, title, year, runtime, 앞에 '-'면 내림차순)"),
    movie_service: MovieService = Depends(get_movie_service),
):
    filters = Filters(page=page, page_size=page_size, sort=sort)
    v = Validator()
    if validate_filters(v, filters):
        raise _failed_validation(v.errors)

    genre_list = [genre.strip() for genre in genres.split(",") if genre.strip()]
    try:
        movies, metadata = movie_service.get_all(title, genre_list, filters)
    except SQLAlchemyError:
        raise _server_error()

    return MovieListEnvelope(
        movies=[MovieResponse.model_validate(movie) for movie in movies],
        metadata=metadata,
    )


@router.post(
    "",
    response_model=MovieEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="영화 등록",
    description="새 영화를 등록합니다. 검증 실패 시 필드별 에러를 모두 반환합니다.",
)
def create_movie(
    payload: MovieCreate,
    response: Response,
    movie_service: MovieService = Depends(get_movie_service),
):
    movie = payload.to_movie()

    v = Validator()
    if validate_movie(v, movie):
        raise _failed_validation(v.errors)

    try:
        movie_service.insert(movie)
    except FailedValidationError as e:
        raise _failed_validation(e.errors)
    except SQLAlchemyError:
        raise _server_error()

    response.headers["Location"] = f"/v1/movies/{movie.id}"
    return MovieEnvelope(movie=MovieResponse.model_validate(movie))


@router.get(
    "/{movie_id}",
    response_model=MovieEnvelope,
    summary="영화 상세 정보",
)
def show_movie(
    movie_id: int = Path(description="영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        movie = movie_service.get(movie_id)
    except RecordNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError:
        raise _server_error()

    return MovieEnvelope(movie=MovieResponse.model_validate(movie))


@router.patch(
    "/{movie_id}",
    response_model=MovieEnvelope,
    summary="영화 수정",
    description=(
        "보낸 필드만 수정합니다. X-Expected-Version 헤더가 있으면 현재 버전과 같을 때만 수정하고, "
        "다른 요청이 먼저 수정한 경우 409를 반환합니다."
    ),
)
def update_movie(
    payload: MovieUpdate,
    movie_id: int = Path(description="영화 ID"),
    x_expected_version: Optional[str] = Header(default=None, description="기대하는 버전"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        movie = movie_service.get(movie_id)
    except RecordNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError:
        raise _server_error()

    if x_expected_version is not None and x_expected_version != str(movie.version):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(EditConflictError()))

    payload.apply_to(movie)

    v = Validator()
    if validate_movie(v, movie):
        raise _failed_validation(v.errors)

    try:
        movie_service.update(movie)
    except EditConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except RecordNotFoundError as e:
        raise _not_found(e)
    except FailedValidationError as e:
        raise _failed_validation(e.errors)
    except SQLAlchemyError:
        raise _server_error()

    return MovieEnvelope(movie=MovieResponse.model_validate(movie))


@router.delete(
    "/{movie_id}",
    summary="영화 삭제",
)
def delete_movie(
    movie_id: int = Path(description="영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        movie_service.delete(movie_id)
    except RecordNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError:
        raise _server_error()

    return {"message": "movie successfully deleted"}
