"""
Aggregates all route modules into a single APIRouter.
"""
from __future__ import annotations

from fastapi import APIRouter

from actrac.api.routes import activities, auth, stats

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(activities.router)
api_router.include_router(stats.router)
