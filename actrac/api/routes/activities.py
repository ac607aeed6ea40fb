"""
Activity routes.
Owner-scoped CRUD over the caller's activities. Every route requires the
identity header.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, status

from actrac.core.dependencies import Activities, CurrentUser, DBSession
from actrac.db.base import MAX_ROW_ID
from actrac.schemas.activity import ActivityRead, ActivityWrite, MessageResponse

router = APIRouter(prefix="/activities", tags=["Activities"])

ActivityId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


@router.get(
    "",
    response_model=list[ActivityRead],
    summary="List my activities, newest first",
)
async def list_activities(
    current_user: CurrentUser,
    db: DBSession,
    service: Activities,
) -> list[ActivityRead]:
    activities = await service.list_activities(db, owner_id=current_user.id)
    return [ActivityRead.model_validate(a) for a in activities]


@router.post(
    "",
    response_model=ActivityRead,
    status_code=status.HTTP_201_CREATED,
    summary="Log a new activity",
)
async def create_activity(
    activity_in: ActivityWrite,
    current_user: CurrentUser,
    db: DBSession,
    service: Activities,
) -> ActivityRead:
    activity = await service.add_activity(
        db, owner_id=current_user.id, activity_in=activity_in
    )
    return ActivityRead.model_validate(activity)


@router.put(
    "/{activity_id}",
    response_model=ActivityRead,
    summary="Replace every editable field of one of my activities",
)
async def update_activity(
    activity_id: ActivityId,
    activity_in: ActivityWrite,
    current_user: CurrentUser,
    db: DBSession,
    service: Activities,
) -> ActivityRead:
    activity = await service.update_activity(
        db,
        owner_id=current_user.id,
        activity_id=activity_id,
        activity_in=activity_in,
    )
    return ActivityRead.model_validate(activity)


@router.delete(
    "/{activity_id}",
    response_model=MessageResponse,
    summary="Delete one of my activities",
)
async def delete_activity(
    activity_id: ActivityId,
    current_user: CurrentUser,
    db: DBSession,
    service: Activities,
) -> MessageResponse:
    await service.delete_activity(db, owner_id=current_user.id, activity_id=activity_id)
    return MessageResponse(message="Activity deleted successfully")
