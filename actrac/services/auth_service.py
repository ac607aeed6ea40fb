"""
Authentication service.
Handles registration and login. Business logic lives here; routes only
call these methods.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from actrac.core.exceptions import (
    ConflictException,
    InternalServerException,
    UnauthorizedException,
)
from actrac.core.security import hash_password, verify_password
from actrac.crud.user import crud_user
from actrac.models.user import User
from actrac.schemas.user import UserCreate

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists. Please login instead."
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:

    async def register_user(
        self, db: AsyncSession, *, user_in: UserCreate
    ) -> User:
        """
        Register a new user.
        The email/username pre-check only gives a friendly early answer;
        the unique constraints decide when two registrations race.
        """
        try:
            existing = await crud_user.get_by_email_or_username(
                db, email=user_in.email, username=user_in.username
            )
        except SQLAlchemyError:
            logger.exception("User lookup failed during registration")
            raise InternalServerException("Registration failed")

        if existing is not None:
            raise ConflictException(USER_EXISTS_MESSAGE)

        try:
            hashed = await run_in_threadpool(hash_password, user_in.password)
        except ValueError:
            logger.exception("Password hashing failed")
            raise InternalServerException("Registration failed")

        try:
            user = await crud_user.create_user(
                db,
                username=user_in.username,
                email=user_in.email,
                hashed_password=hashed,
            )
        except IntegrityError:
            logger.info("Registration lost a uniqueness race for %s", user_in.email)
            raise ConflictException(USER_EXISTS_MESSAGE)
        except SQLAlchemyError:
            logger.exception("User insert failed")
            raise InternalServerException("Registration failed")

        logger.info("Registered user id=%s username=%s", user.id, user.username)
        return user

    async def authenticate_user(
        self, db: AsyncSession, *, email: str, password: str
    ) -> User:
        """Verify credentials and return the matching user."""
        try:
            user = await crud_user.get_by_email(db, email)
        except SQLAlchemyError:
            logger.exception("User lookup failed during login")
            raise InternalServerException("Login failed")

        if user is None or not await run_in_threadpool(
            verify_password, password, user.hashed_password
        ):
            logger.info("Failed login attempt for %s", email)
            raise UnauthorizedException(INVALID_CREDENTIALS_MESSAGE)

        logger.info("User id=%s logged in", user.id)
        return user


auth_service = AuthService()
