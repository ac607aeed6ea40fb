"""
Service and storage tests below the HTTP layer.
Covers: aggregation against a fake ActivityStore, owner-scoped storage
queries, and the registration uniqueness race.
"""
from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.core.exceptions import ConflictException, NotFoundException
from actrac.crud.activity import PointsAggregate, crud_activity
from actrac.crud.user import crud_user
from actrac.models.activity import Activity
from actrac.schemas.activity import ActivityWrite
from actrac.schemas.user import UserCreate
from actrac.services.activity_service import ActivityService
from actrac.services.auth_service import auth_service
from actrac.services.stats_service import GOAL_POINTS, StatsService, remaining_to_goal

pytestmark = pytest.mark.asyncio


class FakeStore:
    """In-memory ActivityStore holding (owner_id, points) pairs."""

    def __init__(self, rows: list[tuple[int, int]] | None = None) -> None:
        self.rows = rows or []

    async def aggregate(self, db: Any, *, owner_id: int) -> PointsAggregate:
        points = [p for owner, p in self.rows if owner == owner_id]
        if not points:
            return PointsAggregate(0, 0, 0.0, 0, 0)
        return PointsAggregate(
            count=len(points),
            total=sum(points),
            average=sum(points) / len(points),
            maximum=max(points),
            minimum=min(points),
        )

    async def update_owned(self, db: Any, **kwargs: Any) -> None:
        return None

    async def remove_owned(self, db: Any, **kwargs: Any) -> bool:
        return False


class TestRemainingToGoal:
    @pytest.mark.parametrize(
        ("total", "remaining"),
        [(0, 100), (30, 70), (99, 1), (100, 0), (250, 0)],
    )
    async def test_remaining(self, total: int, remaining: int) -> None:
        assert GOAL_POINTS == 100
        assert remaining_to_goal(total) == remaining


class TestStatsService:
    async def test_statistics_with_fake_store(self) -> None:
        service = StatsService(store=FakeStore([(1, 40), (1, 40), (1, 40), (2, 500)]))
        stats = await service.statistics(None, owner_id=1)  # type: ignore[arg-type]
        assert stats.model_dump(by_alias=True) == {
            "totalActivities": 3,
            "totalPoints": 120,
            "averagePoints": 40.0,
            "maxPoints": 40,
            "minPoints": 40,
            "remaining": 0,
        }

    async def test_total_for_user_without_activities(self) -> None:
        service = StatsService(store=FakeStore([(2, 500)]))
        total = await service.total_and_remaining(None, owner_id=1)  # type: ignore[arg-type]
        assert (total.total, total.remaining) == (0, 100)


class TestActivityServiceNotFound:
    async def test_update_unmatched_raises_not_found(self) -> None:
        service = ActivityService(store=FakeStore())  # type: ignore[arg-type]
        with pytest.raises(NotFoundException):
            await service.update_activity(
                None,  # type: ignore[arg-type]
                owner_id=1,
                activity_id=5,
                activity_in=ActivityWrite(name="Run", points=10),
            )

    async def test_delete_unmatched_raises_not_found(self) -> None:
        service = ActivityService(store=FakeStore())  # type: ignore[arg-type]
        with pytest.raises(NotFoundException):
            await service.delete_activity(None, owner_id=1, activity_id=5)  # type: ignore[arg-type]


class TestActivityStorage:
    async def test_owner_scoped_queries(self, db: AsyncSession) -> None:
        alice = await crud_user.create_user(
            db, username="alice", email="alice@example.com", hashed_password="x"
        )
        bob = await crud_user.create_user(
            db, username="bob", email="bob@example.com", hashed_password="x"
        )
        activity = await crud_activity.create(
            db, owner_id=alice.id, obj_in=ActivityWrite(name="Hike", points=25)
        )

        assert await crud_activity.get_owned(
            db, owner_id=bob.id, activity_id=activity.id
        ) is None
        assert await crud_activity.remove_owned(
            db, owner_id=bob.id, activity_id=activity.id
        ) is False
        assert await crud_activity.update_owned(
            db,
            owner_id=bob.id,
            activity_id=activity.id,
            obj_in=ActivityWrite(name="Stolen", points=1),
        ) is None

        agg = await crud_activity.aggregate(db, owner_id=alice.id)
        assert agg == PointsAggregate(count=1, total=25, average=25.0, maximum=25, minimum=25)
        assert (await crud_activity.aggregate(db, owner_id=bob.id)).count == 0

        assert await crud_activity.remove_owned(
            db, owner_id=alice.id, activity_id=activity.id
        ) is True
        assert await crud_activity.list_by_owner(db, owner_id=alice.id) == []

    async def test_foreign_key_is_enforced(self, db: AsyncSession) -> None:
        db.add(Activity(user_id=424242, name="Orphan", points=5, date=date(2026, 1, 1)))
        with pytest.raises(IntegrityError):
            await db.flush()


class TestRegistrationRace:
    async def test_unique_constraint_maps_to_conflict(
        self, db: AsyncSession, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        await crud_user.create_user(
            db, username="racer", email="racer@example.com", hashed_password="x"
        )

        async def _miss(*args: Any, **kwargs: Any) -> None:
            return None

        # Simulate a concurrent insert that landed after the pre-check ran
        monkeypatch.setattr(crud_user, "get_by_email_or_username", _miss)

        with pytest.raises(ConflictException):
            await auth_service.register_user(
                db,
                user_in=UserCreate(
                    username="racer2", email="racer@example.com", password="secret123"
                ),
            )
