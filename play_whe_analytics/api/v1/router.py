"""Aggregate API v1 router."""

from fastapi import APIRouter

from play_whe_analytics.api.v1.endpoints import draws, statistics

api_router = APIRouter()

api_router.include_router(draws.router, prefix="/draws", tags=["draws"])
api_router.include_router(statistics.router, prefix="/stats", tags=["statistics"])
