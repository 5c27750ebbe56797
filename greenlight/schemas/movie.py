# greenlight/schemas/movie.py

from typing import Optional, List
from pydantic import BaseModel, Field, StrictInt, model_serializer
from datetime import datetime
from greenlight.schemas.filters import Metadata
from greenlight.schemas.runtime import Runtime


class Movie(BaseModel):
    """영화 레코드 (id, created_at, version은 저장소가 채움)"""

    id: int = Field(default=0, description="영화 ID")
    created_at: Optional[datetime] = Field(default=None, description="생성일시")
    title: str = Field(default="", description="영화 제목")
    year: int = Field(default=0, description="개봉 연도")
    runtime: int = Field(default=0, description="상영시간(분)")
    genres: Optional[List[str]] = Field(default=None, description="장르 목록")
    version: int = Field(default=0, description="낙관적 잠금 버전")

    class Config:
        from_attributes = True


class MovieCreate(BaseModel):
    title: str = Field(default="", description="영화 제목")
    year: StrictInt = Field(default=0, description="개봉 연도")
    runtime: Runtime = Field(default=0, description='상영시간 ("107 mins" 또는 107)')
    genres: Optional[List[str]] = Field(default=None, description="장르 목록 (1~5개)")

    def to_movie(self) -> Movie:
        return Movie(title=self.title, year=self.year, runtime=self.runtime, genres=self.genres)


class MovieUpdate(BaseModel):
    """부분 수정 요청 (없는 필드는 유지)"""

    title: Optional[str] = Field(default=None, description="영화 제목")
    year: Optional[StrictInt] = Field(default=None, description="개봉 연도")
    runtime: Optional[Runtime] = Field(default=None, description="상영시간")
    genres: Optional[List[str]] = Field(default=None, description="장르 목록")

    def apply_to(self, movie: Movie) -> Movie:
        """설정된 필드만 덮어쓴다"""
        for field in self.model_fields_set:
            value = getattr(self, field)
            if value is not None:
                setattr(movie, field, value)
        return movie


class MovieResponse(BaseModel):
    """응답용 영화 정보 (created_at 제외, 빈 값 생략)"""

    id: int = Field(description="영화 ID")
    title: str = Field(description="영화 제목")
    year: int = Field(default=0, description="개봉 연도")
    runtime: Runtime = Field(default=0, description="상영시간")
    genres: Optional[List[str]] = Field(default=None, description="장르 목록")
    version: int = Field(description="버전")

    class Config:
        from_attributes = True

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        data = handler(self)
        if not self.year:
            data.pop("year", None)
        if not self.runtime:
            data.pop("runtime", None)
        if not self.genres:
            data.pop("genres", None)
        return data


class MovieEnvelope(BaseModel):
    movie: MovieResponse


class MovieListEnvelope(BaseModel):
    movies: List[MovieResponse] = Field(description="영화 목록")
    metadata: Metadata = Field(description="페이지 정보")
