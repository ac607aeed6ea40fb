"""
Activity CRUD operations.
Every query is scoped by owner: a row that exists but belongs to someone
else is indistinguishable from a missing row.

ActivityStore is the storage interface the services depend on; CRUDActivity
is the SQLAlchemy implementation. Tests may substitute any object with the
same methods.
"""
from __future__ import annotations

from typing import NamedTuple, Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.crud.base import CRUDBase
from actrac.models.activity import Activity
from actrac.schemas.activity import ActivityWrite


class PointsAggregate(NamedTuple):
    count: int
    total: int
    average: float
    maximum: int
    minimum: int


class ActivityStore(Protocol):

    async def create(
        self, db: AsyncSession, *, owner_id: int, obj_in: ActivityWrite
    ) -> Activity: ...

    async def list_by_owner(
        self, db: AsyncSession, *, owner_id: int
    ) -> list[Activity]: ...

    async def get_owned(
        self, db: AsyncSession, *, owner_id: int, activity_id: int
    ) -> Activity | None: ...

    async def update_owned(
        self,
        db: AsyncSession,
        *,
        owner_id: int,
        activity_id: int,
        obj_in: ActivityWrite,
    ) -> Activity | None: ...

    async def remove_owned(
        self, db: AsyncSession, *, owner_id: int, activity_id: int
    ) -> bool: ...

    async def aggregate(self, db: AsyncSession, *, owner_id: int) -> PointsAggregate: ...


class CRUDActivity(CRUDBase[Activity]):

    async def create(
        self, db: AsyncSession, *, owner_id: int, obj_in: ActivityWrite
    ) -> Activity:
        activity = Activity(user_id=owner_id, **obj_in.model_dump())
        return await self.add(db, activity)

    async def list_by_owner(
        self, db: AsyncSession, *, owner_id: int
    ) -> list[Activity]:
        """Newest first; id breaks ties between rows created in the same tick."""
        result = await db.execute(
            select(Activity)
            .where(Activity.user_id == owner_id)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
        )
        return list(result.scalars().all())

    async def get_owned(
        self, db: AsyncSession, *, owner_id: int, activity_id: int
    ) -> Activity | None:
        result = await db.execute(
            select(Activity).where(
                Activity.id == activity_id,
                Activity.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def update_owned(
        self,
        db: AsyncSession,
        *,
        owner_id: int,
        activity_id: int,
        obj_in: ActivityWrite,
    ) -> Activity | None:
        activity = await self.get_owned(db, owner_id=owner_id, activity_id=activity_id)
        if activity is None:
            return None
        return await self.update(db, db_obj=activity, obj_in=obj_in.model_dump())

    async def remove_owned(
        self, db: AsyncSession, *, owner_id: int, activity_id: int
    ) -> bool:
        """Delete by id and owner together. Returns False when no row matched both."""
        result = await db.execute(
            delete(Activity).where(
                Activity.id == activity_id,
                Activity.user_id == owner_id,
            )
        )
        return (result.rowcount or 0) > 0

    async def aggregate(self, db: AsyncSession, *, owner_id: int) -> PointsAggregate:
        result = await db.execute(
            select(
                func.count(Activity.id),
                func.coalesce(func.sum(Activity.points), 0),
                func.coalesce(func.avg(Activity.points), 0),
                func.coalesce(func.max(Activity.points), 0),
                func.coalesce(func.min(Activity.points), 0),
            ).where(Activity.user_id == owner_id)
        )
        count, total, average, maximum, minimum = result.one()
        return PointsAggregate(
            count=int(count),
            total=int(total),
            average=float(average),
            maximum=int(maximum),
            minimum=int(minimum),
        )


crud_activity = CRUDActivity(Activity)
