"""Normalize highlight dates from the formats exports use."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta, timezone

from dateutil.parser import isoparse

from highlight_sync.config import BOOK_DATE_OFFSET

# "March 3, 2020", as written by the app-native email exports.
LONG_DATE_FORMAT = "%B %d, %Y"


def _parse_long(value: str) -> datetime:
    return datetime.strptime(value, LONG_DATE_FORMAT)


_PARSERS: tuple[Callable[[str], datetime], ...] = (isoparse, _parse_long)


def normalize_date(value: object) -> str | None:
    """Return ``value`` as a UTC ISO-8601 instant, or None if it cannot be parsed.

    Accepts ISO-8601 or "Month D, YYYY". Values without a zone are read as UTC.
    The output keeps millisecond precision with a ``Z`` suffix, e.g.
    ``2020-03-03T00:00:00.000Z``.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    for parse in _PARSERS:
        try:
            parsed = parse(value)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=UTC)
            instant = parsed.astimezone(UTC)
        except (ValueError, OverflowError):
            continue
        return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return None


def book_timestamp(now: datetime | None = None, *, offset: timedelta = BOOK_DATE_OFFSET) -> str:
    """Creation stamp for a new book, in the fixed book offset."""
    moment = now or datetime.now(UTC)
    return moment.astimezone(timezone(offset)).isoformat(timespec="seconds")
