"""
ConfTrack Backend: Shared Column Types and Timestamp Helpers
============================================================

Timestamps are stored as UTC without a zone (TIMESTAMP on Postgres, text on
SQLite) and always surface in Python as timezone-aware UTC datetimes.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.types import TypeDecorator

# BIGSERIAL on Postgres; SQLite only autoincrements INTEGER PRIMARY KEY
BigIntPK = BigInteger().with_variant(Integer, "sqlite")

# Value ranges of INTEGER (tenantId) and BIGINT (ids, user references)
INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_update_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Timestamp for a mutation that is strictly later than `previous`.

    Two updates inside the same clock tick (or after the clock stepped back)
    still produce increasing updated_at values.
    """
    now = utcnow()
    if previous is not None:
        previous = as_utc(previous)
        if now <= previous:
            return previous + timedelta(microseconds=1)
    return now


class UTCDateTime(TypeDecorator):
    """DateTime column that binds UTC-naive values and returns aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return as_utc(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)
