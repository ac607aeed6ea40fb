"""
Shared slowapi limiter, keyed by client address.
Routes decorate with it; the application registers it on app.state.
"""
from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from actrac.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
