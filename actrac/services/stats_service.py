"""
Aggregation over a user's activity points against the fixed 100 point goal.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.core.exceptions import InternalServerException
from actrac.crud.activity import ActivityStore, PointsAggregate, crud_activity
from actrac.schemas.activity import ActivityStats, ActivityTotal

logger = logging.getLogger(__name__)

GOAL_POINTS = 100


def remaining_to_goal(total: int) -> int:
    return max(0, GOAL_POINTS - total)


class StatsService:

    def __init__(self, store: ActivityStore = crud_activity) -> None:
        self.store = store

    async def _aggregate(
        self, db: AsyncSession, *, owner_id: int, failure_message: str
    ) -> PointsAggregate:
        try:
            return await self.store.aggregate(db, owner_id=owner_id)
        except SQLAlchemyError:
            logger.exception("Points aggregation failed for user_id=%s", owner_id)
            raise InternalServerException(failure_message)

    async def total_and_remaining(
        self, db: AsyncSession, *, owner_id: int
    ) -> ActivityTotal:
        agg = await self._aggregate(
            db, owner_id=owner_id, failure_message="Failed to calculate total"
        )
        return ActivityTotal(total=agg.total, remaining=remaining_to_goal(agg.total))

    async def statistics(self, db: AsyncSession, *, owner_id: int) -> ActivityStats:
        """Count, sum, mean, max and min of points; all zero when there are no activities."""
        agg = await self._aggregate(
            db, owner_id=owner_id, failure_message="Failed to retrieve statistics"
        )
        return ActivityStats(
            total_activities=agg.count,
            total_points=agg.total,
            average_points=agg.average,
            max_points=agg.maximum,
            min_points=agg.minimum,
            remaining=remaining_to_goal(agg.total),
        )


stats_service = StatsService()
