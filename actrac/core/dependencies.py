"""
FastAPI dependency injection functions.
Provides get_db, get_current_user, and the service providers routes depend on.

Identity is trust-on-claim: the client sends its user id in the identity
header (``user-id`` by default) and the value is not signed. The gate only
checks that the id resolves to an existing user.
"""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.core.config import settings
from actrac.core.exceptions import UnauthorizedException
from actrac.crud.user import crud_user
from actrac.db.base import MAX_ROW_ID
from actrac.db.session import get_db
from actrac.schemas.user import UserRead
from actrac.services.activity_service import ActivityService, activity_service
from actrac.services.stats_service import StatsService, stats_service

logger = logging.getLogger(__name__)

# Re-export get_db so routes can import from one place
__all__ = [
    "get_db",
    "get_current_user",
    "get_activity_service",
    "get_stats_service",
    "DBSession",
    "CurrentUser",
    "Activities",
    "Stats",
]


async def get_current_user(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str | None, Header(alias=settings.IDENTITY_HEADER)] = None,
) -> UserRead:
    """
    Resolve the identity header to a stored user.
    Attaches the public identity (id, username, email) to ``request.state.user``.
    """
    if not user_id:
        raise UnauthorizedException("User ID is required")

    try:
        parsed_id = int(user_id.strip())
    except ValueError:
        raise UnauthorizedException("Invalid user")
    if not 1 <= parsed_id <= MAX_ROW_ID:
        raise UnauthorizedException("Invalid user")

    try:
        user = await crud_user.get(db, parsed_id)
    except SQLAlchemyError:
        logger.exception("Identity lookup failed for user_id=%s", parsed_id)
        raise UnauthorizedException("Invalid user")

    if user is None:
        raise UnauthorizedException("Invalid user")

    identity = UserRead.model_validate(user)
    request.state.user = identity
    return identity


def get_activity_service() -> ActivityService:
    return activity_service


def get_stats_service() -> StatsService:
    return stats_service


# Convenience type aliases for route signatures
DBSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[UserRead, Depends(get_current_user)]
Activities = Annotated[ActivityService, Depends(get_activity_service)]
Stats = Annotated[StatsService, Depends(get_stats_service)]
