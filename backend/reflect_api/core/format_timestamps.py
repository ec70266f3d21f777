"""Timestamp Formatting — the two UTC ISO-8601 shapes used on the wire.

Invariants:
    - iso_millis: YYYY-MM-DDTHH:MM:SS.sssZ (rate and APY listings, health)
    - iso_seconds: YYYY-MM-DDTHH:MM:SSZ (historical APY)
    - Naive datetimes are rejected; aware ones are converted to UTC first
"""

from datetime import datetime, timezone


def iso_millis(moment: datetime) -> str:
    utc = _to_utc(moment)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def iso_seconds(moment: datetime) -> str:
    return _to_utc(moment).strftime("%Y-%m-%dT%H:%M:%SZ")


def utc_now_millis() -> str:
    return iso_millis(datetime.now(timezone.utc))


def _to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.astimezone(timezone.utc)
