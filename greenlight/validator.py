# greenlight/validator.py

from typing import Any, Dict, Iterable, Optional


class Validator:
    """필드별 검증 에러 수집기

    규칙 하나가 실패해도 멈추지 않고 모든 규칙을 평가한다.
    같은 필드에 여러 에러가 생기면 먼저 기록된 메시지만 남는다.
    """

    def __init__(self, errors: Optional[Dict[str, str]] = None):
        self.errors: Dict[str, str] = dict(errors or {})

    def valid(self) -> bool:
        """에러가 없으면 True"""
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        if key not in self.errors:
            self.errors[key] = message

    def check(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_error(key, message)

    def merge(self, other: "Validator") -> None:
        """다른 검증기의 에러를 합친다 (기존 메시지 우선)"""
        for key, message in other.errors.items():
            self.add_error(key, message)

    def __repr__(self):
        return f"<Validator(errors={self.errors})>"


def permitted_value(value: Any, permitted: Iterable[Any]) -> bool:
    return value in set(permitted)


def unique(values: Optional[Iterable[Any]]) -> bool:
    """모든 값이 서로 다르면 True (None은 빈 목록으로 취급)"""
    seen = set()
    for value in values or ():
        if value in seen:
            return False
        seen.add(value)
    return True
