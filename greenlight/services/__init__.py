# greenlight/services/__init__.py

from .movie_service import MovieService
from .validation import validate_movie, validate_filters

__all__ = ["MovieService", "validate_movie", "validate_filters"]
