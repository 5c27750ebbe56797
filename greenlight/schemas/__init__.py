# greenlight/schemas/__init__.py

from .movie import (
    Movie,
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    MovieEnvelope,
    MovieListEnvelope,
)
from .filters import Filters, Metadata, MOVIE_SORT_SAFELIST
from .runtime import Runtime, parse_runtime, format_runtime

__all__ = [
    "Movie",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "MovieEnvelope",
    "MovieListEnvelope",
    "Filters",
    "Metadata",
    "MOVIE_SORT_SAFELIST",
    "Runtime",
    "parse_runtime",
    "format_runtime",
]
