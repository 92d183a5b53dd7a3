"""
Bug Tracker Backend — Settings Tests
======================================
"""

import pytest
from pydantic import ValidationError

from bugtracker.config import Settings


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_store_backend_is_normalized(self):
        assert Settings(store_backend="MEMORY").store_backend == "memory"

    def test_invalid_store_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(store_backend="mongo")

    def test_cors_origins_list(self):
        config = Settings(cors_origins="http://a.test, http://b.test,")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("sqlite+aiosqlite:///./bugs.db", True),
            ("postgresql+asyncpg://u:p@localhost/bugs", False),
        ],
    )
    def test_is_sqlite(self, url, expected):
        assert Settings(database_url=url).is_sqlite is expected
