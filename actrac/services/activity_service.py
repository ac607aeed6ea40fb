"""
Activity ledger service.
Owner-scoped add/list/update/delete over a user's activities. Input is
already validated by ActivityWrite; storage failures are logged here and
surfaced as a generic internal error.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.core.exceptions import InternalServerException, NotFoundException
from actrac.crud.activity import ActivityStore, crud_activity
from actrac.models.activity import Activity
from actrac.schemas.activity import ActivityWrite

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Activity not found or unauthorized"


class ActivityService:

    def __init__(self, store: ActivityStore = crud_activity) -> None:
        self.store = store

    async def add_activity(
        self, db: AsyncSession, *, owner_id: int, activity_in: ActivityWrite
    ) -> Activity:
        try:
            activity = await self.store.create(db, owner_id=owner_id, obj_in=activity_in)
        except SQLAlchemyError:
            logger.exception("Activity insert failed for user_id=%s", owner_id)
            raise InternalServerException("Failed to add activity")

        logger.debug("User id=%s added activity id=%s", owner_id, activity.id)
        return activity

    async def list_activities(self, db: AsyncSession, *, owner_id: int) -> list[Activity]:
        try:
            return await self.store.list_by_owner(db, owner_id=owner_id)
        except SQLAlchemyError:
            logger.exception("Activity select failed for user_id=%s", owner_id)
            raise InternalServerException("Failed to retrieve activities")

    async def update_activity(
        self,
        db: AsyncSession,
        *,
        owner_id: int,
        activity_id: int,
        activity_in: ActivityWrite,
    ) -> Activity:
        """Replace every editable field. Foreign and missing ids both raise NotFound."""
        try:
            activity = await self.store.update_owned(
                db, owner_id=owner_id, activity_id=activity_id, obj_in=activity_in
            )
        except SQLAlchemyError:
            logger.exception(
                "Activity update failed for id=%s user_id=%s", activity_id, owner_id
            )
            raise InternalServerException("Failed to update activity")

        if activity is None:
            raise NotFoundException(NOT_FOUND_MESSAGE)
        return activity

    async def delete_activity(
        self, db: AsyncSession, *, owner_id: int, activity_id: int
    ) -> None:
        try:
            removed = await self.store.remove_owned(
                db, owner_id=owner_id, activity_id=activity_id
            )
        except SQLAlchemyError:
            logger.exception(
                "Activity delete failed for id=%s user_id=%s", activity_id, owner_id
            )
            raise InternalServerException("Failed to delete activity")

        if not removed:
            raise NotFoundException(NOT_FOUND_MESSAGE)
        logger.debug("User id=%s deleted activity id=%s", owner_id, activity_id)


activity_service = ActivityService()
