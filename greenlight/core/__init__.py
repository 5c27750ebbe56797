# greenlight/core/__init__.py

from .config import get_settings, Settings
from .exceptions import RecordNotFoundError, EditConflictError, FailedValidationError
from .logging_config import setup_logging

__all__ = [
    "get_settings",
    "Settings",
    "RecordNotFoundError",
    "EditConflictError",
    "FailedValidationError",
    "setup_logging",
]
