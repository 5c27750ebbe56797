# greenlight/schemas/filters.py

from typing import List
from pydantic import BaseModel, Field

MOVIE_SORT_SAFELIST = ["id", "title", "year", "runtime", "-id", "-title", "-year", "-runtime"]


class Filters(BaseModel):
    """목록 조회용 페이지/정렬 조건"""

    page: int = Field(default=1, description="페이지 번호")
    page_size: int = Field(default=20, description="페이지 크기")
    sort: str = Field(default="id", description="정렬 기준 (앞에 '-'면 내림차순)")
    sort_safelist: List[str] = Field(
        default_factory=lambda: list(MOVIE_SORT_SAFELIST), description="허용 정렬 값"
    )

    def sort_column(self) -> str:
        # 검증을 거친 값만 들어와야 한다
        if self.sort not in self.sort_safelist:
            raise ValueError(f"unsafe sort parameter: {self.sort}")
        return self.sort.lstrip("-")

    def sort_descending(self) -> bool:
        return self.sort.startswith("-")

    def limit(self) -> int:
        return self.page_size

    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class Metadata(BaseModel):
    current_page: int = Field(default=0, description="현재 페이지")
    page_size: int = Field(default=0, description="페이지 크기")
    first_page: int = Field(default=0, description="첫 페이지")
    last_page: int = Field(default=0, description="마지막 페이지")
    total_records: int = Field(default=0, description="전체 레코드 수")

    @classmethod
    def calculate(cls, total_records: int, page: int, page_size: int) -> "Metadata":
        if total_records == 0:
            return cls()
        return cls(
            current_page=page,
            page_size=page_size,
            first_page=1,
            last_page=(total_records + page_size - 1) // page_size,
            total_records=total_records,
        )
