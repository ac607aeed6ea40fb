"""
User CRUD operations.
Extends CRUDBase with the lookups registration, login and identity
resolution need.
"""
from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from actrac.crud.base import CRUDBase
from actrac.models.user import User


class CRUDUser(CRUDBase[User]):

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_email_or_username(
        self, db: AsyncSession, *, email: str, username: str
    ) -> User | None:
        result = await db.execute(
            select(User)
            .where(or_(User.email == email, User.username == username))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create_user(
        self,
        db: AsyncSession,
        *,
        username: str,
        email: str,
        hashed_password: str,
    ) -> User:
        """
        Insert a user. Raises IntegrityError when the username or email
        unique constraint rejects the row.
        """
        user = User(username=username, email=email, hashed_password=hashed_password)
        return await self.add(db, user)


crud_user = CRUDUser(User)
