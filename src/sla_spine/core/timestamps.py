"""
UTC timestamp utilities (stdlib-only).

Every instant inside sla-spine is a timezone-aware UTC ``datetime``.  The
wire and storage formats use epoch milliseconds; output for humans uses an
RFC 822 style string in a caller-chosen zone.

Features:
    - **utc_now():** Timezone-aware UTC datetime (the default clock)
    - **to_epoch_ms() / from_epoch_ms():** Millisecond round-trip
    - **parse_utc_minute():** ``2012-06-03T16:00Z`` filter dates
    - **format_rfc822():** ``Sun, 03 Jun 2012 16:00:00 GMT``

Tags:
    timestamps, utc, datetime, epoch-ms, rfc822, stdlib-only

STDLIB ONLY - NO PYDANTIC.
"""

import re
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sla_spine.core.errors import InvalidTimeZoneError

UTC_MINUTE_FORMAT = "%Y-%m-%dT%H:%MZ"

# strptime alone accepts unpadded fields such as 2012-6-3T1:0Z.
_UTC_MINUTE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}Z")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Fixed English names so output does not depend on the process locale.
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Return *dt* as an aware UTC datetime.  Naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_epoch_ms(dt: datetime) -> int:
    """Milliseconds since the Unix epoch, exact for millisecond instants."""
    delta = ensure_utc(dt) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_ms(ms: int) -> datetime:
    """Inverse of :func:`to_epoch_ms`."""
    return _EPOCH + timedelta(milliseconds=ms)


def parse_utc_minute(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MMZ`` into an aware UTC datetime.

    Raises:
        ValueError: if *value* does not match the format.
    """
    if not _UTC_MINUTE_PATTERN.fullmatch(value):
        raise ValueError(f"time data {value!r} does not match format {UTC_MINUTE_FORMAT!r}")
    return datetime.strptime(value, UTC_MINUTE_FORMAT).replace(tzinfo=UTC)


def resolve_time_zone(name: str) -> ZoneInfo:
    """Look up an IANA zone, raising :class:`InvalidTimeZoneError` if unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimeZoneError(name, cause=e) from e


def format_rfc822(dt: datetime, time_zone: str) -> str:
    """Format *dt* in *time_zone* as ``EEE, dd MMM yyyy HH:mm:ss zzz``."""
    local = ensure_utc(dt).astimezone(resolve_time_zone(time_zone))
    return (
        f"{_DAY_NAMES[local.weekday()]}, {local.day:02d} {_MONTH_NAMES[local.month - 1]} "
        f"{local.year:04d} {local:%H:%M:%S} {local.tzname()}"
    )
