"""
ORM model package. Import all models here so Alembic autogenerate
can discover every table through the shared Base metadata.
"""
from actrac.models.user import User  # noqa: F401
from actrac.models.activity import Activity  # noqa: F401
