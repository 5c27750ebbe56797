# greenlight/schemas/runtime.py

import re
from typing import Annotated, Any
from pydantic import BeforeValidator, PlainSerializer

RUNTIME_RX = re.compile(r"^(-?\d+) mins$")


def parse_runtime(value: Any) -> int:
    """'<n> mins' 형식 문자열 또는 정수를 분 단위 정수로 변환"""
    if isinstance(value, bool):
        raise ValueError("invalid runtime format")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = RUNTIME_RX.match(value)
        if match is None:
            raise ValueError("invalid runtime format")
        return int(match.group(1))
    raise ValueError("invalid runtime format")


def format_runtime(value: int) -> str:
    return f"{value} mins"


# 내부에서는 정수, JSON에서는 "<n> mins"
Runtime = Annotated[
    int,
    BeforeValidator(parse_runtime),
    PlainSerializer(format_runtime, return_type=str),
]
