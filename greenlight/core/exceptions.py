# greenlight/core/exceptions.py

from typing import Dict


class RecordNotFoundError(Exception):
    """요청한 레코드가 없거나 ID가 유효하지 않음"""

    def __init__(self, message: str = "the requested resource could not be found"):
        super().__init__(message)


class EditConflictError(Exception):
    """버전 불일치 (다른 요청이 먼저 수정함)"""

    def __init__(
        self,
        message: str = "unable to update the record due to an edit conflict, please try again",
    ):
        super().__init__(message)


class FailedValidationError(Exception):
    """필드 검증 실패, 필드별 메시지를 모두 담는다"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{key}: {msg}" for key, msg in self.errors.items()))
