"""
Settings parsing tests.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from actrac.core.config import Settings


class TestSettings:
    def test_origins_from_comma_separated_string(self) -> None:
        settings = Settings(ALLOWED_ORIGINS="http://a.test, http://b.test")
        assert settings.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]

    def test_origins_from_json_array(self) -> None:
        settings = Settings(ALLOWED_ORIGINS='["http://a.test"]')
        assert settings.ALLOWED_ORIGINS == ["http://a.test"]

    def test_bcrypt_rounds_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)

    def test_log_level_normalized(self) -> None:
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_sqlite_detection(self) -> None:
        assert Settings(DATABASE_URL="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(DATABASE_URL="postgresql+asyncpg://u:p@h/db").is_sqlite
