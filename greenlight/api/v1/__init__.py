# greenlight/api/v1/__init__.py

from fastapi import APIRouter
from . import movies, system

api_router = APIRouter()

api_router.include_router(movies.router, prefix="/movies", tags=["영화"])
api_router.include_router(system.router, tags=["시스템"])
