"""
ConfTrack Backend: Settings Tests
=================================
"""

import pytest
from pydantic import ValidationError

from conftrack.config import Settings


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql+asyncpg://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("sqlite+aiosqlite://", "sqlite+aiosqlite://"),
    ],
)
def test_database_url_normalized_to_asyncpg(url, expected):
    assert _settings(database_url=url).database_url == expected


def test_is_sqlite():
    assert _settings(database_url="sqlite+aiosqlite://").is_sqlite
    assert not _settings(database_url="postgresql://u:p@db/app").is_sqlite


def test_log_level_is_upper_cased():
    assert _settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError, match="log_level"):
        _settings(log_level="verbose")


def test_transaction_mode_case_insensitive():
    assert _settings(webhook_transaction_mode="SEQUENTIAL").webhook_transaction_mode == "sequential"


def test_invalid_transaction_mode_rejected():
    with pytest.raises(ValidationError, match="webhook_transaction_mode"):
        _settings(webhook_transaction_mode="eventual")


def test_cors_origins_split():
    settings = _settings(cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_operation_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        _settings(db_operation_timeout=0)
