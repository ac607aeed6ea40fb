"""
SQLAlchemy declarative base, shared metadata, and additive schema bootstrap.
All models must import and inherit from Base defined here.
"""
from __future__ import annotations

import logging

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)

# Deterministic constraint names keep Alembic revisions stable across backends
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Largest rowid SQLite can store; ids above it never reach the driver
MAX_ROW_ID = 2**63 - 1


class Base(DeclarativeBase):
    """Shared declarative base for the users and activities tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


async def create_missing_tables(engine: AsyncEngine) -> None:
    """
    Create any table that does not exist yet.
    Existing tables and their rows are left untouched; column changes go
    through Alembic revisions instead.
    """
    import actrac.models  # noqa: F401 — registers every table on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
