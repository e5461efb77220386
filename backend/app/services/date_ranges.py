"""Resolve analytics query parameters into an inclusive UTC interval."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.errors import (
    ConflictingRangeParams,
    InvalidRangeFormat,
    InvertedRange,
    MissingRangeParams,
)

logger = logging.getLogger(__name__)

MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
ONE_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True)
class Interval:
    """Closed interval of UTC instants; both ends are inclusive."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= as_utc(instant) <= self.end


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def month_interval(year: int, month: int) -> Interval:
    """First instant of the month up to one millisecond before the next month."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        next_start = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        next_start = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return Interval(start=start, end=next_start - ONE_MILLISECOND)


def parse_month(token: str) -> Interval:
    match = MONTH_PATTERN.fullmatch(token)
    if not match:
        raise InvalidRangeFormat("Invalid month format, expected YYYY-MM.", field="month")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidRangeFormat("Invalid month format, expected YYYY-MM.", field="month")

    try:
        return month_interval(year, month)
    except (ValueError, OverflowError):
        raise InvalidRangeFormat("Month is outside the supported date range.", field="month")


def parse_timestamp(value: str, field: str) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidRangeFormat(f"Invalid timestamp for '{field}'.", field=field)
    try:
        return as_utc(parsed)
    except (ValueError, OverflowError):
        raise InvalidRangeFormat(f"Timestamp for '{field}' is out of range.", field=field)


def resolve_range(
    month: Optional[str] = None,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    require_explicit: bool = False,
    default_days: int = 30,
) -> Interval:
    """
    Turn a month token or a from/to pair into an Interval.

    With no parameters the trailing ``default_days`` window ending at ``now``
    is returned, unless ``require_explicit`` is set (budget analytics), in
    which case MissingRangeParams is raised.
    """
    has_from = from_ is not None
    has_to = to is not None

    if month is not None and (has_from or has_to):
        raise ConflictingRangeParams(
            "Provide either month or from/to range, not both.", field="month"
        )

    if has_from != has_to:
        raise ConflictingRangeParams(
            "Both from and to must be provided together.",
            field="to" if has_from else "from",
        )

    if month is not None:
        interval = parse_month(month)
    elif has_from:
        start = parse_timestamp(from_, "from")
        end = parse_timestamp(to, "to")
        if start > end:
            raise InvertedRange("from must be before to.", field="from")
        interval = Interval(start=start, end=end)
    elif require_explicit:
        raise MissingRangeParams("Provide either month or from/to range.", field="month")
    else:
        end = as_utc(now) if now is not None else utc_now()
        interval = Interval(start=end - timedelta(days=default_days - 1), end=end)

    logger.debug("Resolved analytics range %s .. %s", interval.start, interval.end)
    return interval
