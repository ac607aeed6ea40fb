"""
Points aggregate routes.
GET /total, /stats
"""
from __future__ import annotations

from fastapi import APIRouter

from actrac.core.dependencies import CurrentUser, DBSession, Stats
from actrac.schemas.activity import ActivityStats, ActivityTotal

router = APIRouter(tags=["Statistics"])


@router.get(
    "/total",
    response_model=ActivityTotal,
    summary="My total points and what is left to the goal",
)
async def get_total(
    current_user: CurrentUser,
    db: DBSession,
    service: Stats,
) -> ActivityTotal:
    return await service.total_and_remaining(db, owner_id=current_user.id)


@router.get(
    "/stats",
    response_model=ActivityStats,
    summary="Summary statistics over my points",
)
async def get_stats(
    current_user: CurrentUser,
    db: DBSession,
    service: Stats,
) -> ActivityStats:
    return await service.statistics(db, owner_id=current_user.id)
