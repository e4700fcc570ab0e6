"""
Fixed-layout timestamp formatting.

- DateFormat: immutable (format code, zone) pair rendering one of four layouts.
- calendar_fields: decomposition of an instant into wall-clock fields in a zone.
- left_pad_with_zeros: zero padding to a minimum width, never truncating.

Predefined formatters: ISO8601_FULL, ISO8601_DATE, ISO8601_TIMESTAMP (UTC),
NTP (default zone) and NTP_UTC.
"""

import logging
from datetime import datetime, timedelta, tzinfo
from enum import IntEnum
from typing import NamedTuple, Optional, Union

import pytz

from config.settings import Settings

logger = logging.getLogger(__name__)

Instant = Union[datetime, int, float]
ZoneLike = Union[tzinfo, str, None]

_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)

DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class FormatCode(IntEnum):
    """Layout selectors understood by DateFormat."""

    ISO8601_FULL = 1       # 2016-07-26T11:04:57.999UTC
    ISO8601_DATE = 2       # 2016-07-26
    ISO8601_TIMESTAMP = 3  # 2016-07-26T11:04:57UTC
    NTP = 4                # Fri, Sep 12 2003 21:06:23.860 UTC


class CalendarFields(NamedTuple):
    """Wall-clock fields of an instant; day_of_week is 0 for Sunday."""

    year: int
    month: int
    day: int
    day_of_week: int
    hour: int
    minute: int
    second: int
    millisecond: int


def default_zone() -> tzinfo:
    """Zone used for field extraction when a formatter has none configured."""
    return Settings.SERVER_TZ


def zone_label(zone: tzinfo) -> str:
    """
    Return the identifier of a zone as it appears in formatted output.

    pytz zones expose it as `.zone` ("UTC", "Europe/Berlin"), zoneinfo zones
    as `.key`; anything else falls back to str().
    """
    return getattr(zone, "zone", None) or getattr(zone, "key", None) or str(zone)


def _resolve_zone(zone: ZoneLike) -> Optional[tzinfo]:
    if zone is None or isinstance(zone, tzinfo):
        return zone
    if isinstance(zone, str):
        # Raises pytz.UnknownTimeZoneError for unknown ids
        return pytz.timezone(zone)
    raise TypeError(f"Unsupported zone type: {type(zone).__name__}")


def _to_datetime(instant: Instant, zone: tzinfo) -> datetime:
    """Bring an instant to the wall clock of `zone`."""
    try:
        return _convert(instant, zone)
    except OverflowError as e:
        # datetime covers years 1 to 9999 only
        raise ValueError(f"Instant out of supported range (years 1-9999): {instant!r}") from e


def _convert(instant: Instant, zone: tzinfo) -> datetime:
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            # Naive input is read as default-zone wall clock
            tz = default_zone()
            if hasattr(tz, "localize"):
                instant = tz.localize(instant)  # pytz
            else:
                instant = instant.replace(tzinfo=tz)  # zoneinfo
        return instant.astimezone(zone)
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        # Milliseconds since the Unix epoch
        return (_EPOCH + timedelta(milliseconds=instant)).astimezone(zone)
    raise TypeError(f"Unsupported instant type: {type(instant).__name__}")


def calendar_fields(instant: Instant, zone: Optional[tzinfo] = None) -> CalendarFields:
    """
    Decompose an instant into calendar fields for the given zone.

    This is the only place that touches the datetime library; DateFormat
    builds its layouts from the returned fields alone.

    Args:
        instant: Aware datetime, naive datetime (default zone) or epoch millis
        zone: Zone whose wall clock is used; None means default_zone()

    Returns:
        CalendarFields for the instant in that zone

    Raises:
        TypeError: If the instant is not a datetime or a number
        ValueError: If the instant falls outside years 1-9999 in that zone
    """
    dt = _to_datetime(instant, zone if zone is not None else default_zone())
    return CalendarFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        day_of_week=dt.isoweekday() % 7,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
    )


def left_pad_with_zeros(value: int, min_size: int) -> str:
    """
    Render an integer left-padded with '0' to at least min_size characters.

    Values wider than min_size are returned in full, never truncated:
      left_pad_with_zeros(7, 2)     -> "07"
      left_pad_with_zeros(12345, 4) -> "12345"
    """
    digits = str(value)
    return "0" * (min_size - len(digits)) + digits


class DateFormat:
    """
    Immutable timestamp formatter for one fixed layout and zone.

    The format code is validated on construction; the zone defaults to UTC.
    Pass zone=None to format in the default zone without a zone label.
    Instances hold no mutable state and can be shared between threads.

    Example:
        >>> fmt = DateFormat(FormatCode.ISO8601_FULL)
        >>> fmt.format(datetime(2016, 7, 26, 11, 4, 57, 999000, tzinfo=pytz.UTC))
        '2016-07-26T11:04:57.999UTC'
    """

    __slots__ = ("_format", "_zone")

    def __init__(self, format_code: Union[FormatCode, int], zone: ZoneLike = pytz.UTC) -> None:
        # Raises ValueError for codes outside FormatCode
        object.__setattr__(self, "_format", FormatCode(format_code))
        object.__setattr__(self, "_zone", _resolve_zone(zone))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def format_code(self) -> FormatCode:
        return self._format

    @property
    def zone(self) -> Optional[tzinfo]:
        return self._zone

    def __eq__(self, other):
        if not isinstance(other, DateFormat):
            return NotImplemented
        return (self._format, self._zone) == (other._format, other._zone)

    def __hash__(self):
        return hash((self._format, self._zone))

    def __repr__(self) -> str:
        zone = zone_label(self._zone) if self._zone is not None else None
        return f"DateFormat({self._format.name}, zone={zone!r})"

    def format(self, instant: Instant) -> str:
        """
        Format an instant with the configured layout.

        Args:
            instant: Aware datetime, naive datetime (default zone) or epoch millis

        Returns:
            Formatted timestamp text

        Raises:
            TypeError: If the instant type is not supported
            ValueError: If the format code is unknown or the instant is out of range
        """
        cal = calendar_fields(instant, self._zone)
        parts = []

        if self._format == FormatCode.ISO8601_DATE:
            self._append_date(cal, parts)
        elif self._format == FormatCode.ISO8601_FULL:
            self._append_date(cal, parts)
            parts.append("T")
            self._append_time(cal, parts)
            parts.append(".")
            parts.append(left_pad_with_zeros(cal.millisecond, 3))
            self._append_zone(parts)
        elif self._format == FormatCode.ISO8601_TIMESTAMP:
            self._append_date(cal, parts)
            parts.append("T")
            self._append_time(cal, parts)
            self._append_zone(parts)
        elif self._format == FormatCode.NTP:
            parts.append(DAYS[cal.day_of_week])
            parts.append(", ")
            parts.append(MONTHS[cal.month - 1])
            parts.append(" ")
            parts.append(left_pad_with_zeros(cal.day, 2))
            parts.append(" ")
            parts.append(left_pad_with_zeros(cal.year, 4))
            parts.append(" ")
            self._append_time(cal, parts)
            parts.append(".")
            parts.append(left_pad_with_zeros(cal.millisecond, 3))
            if self._zone is not None:
                parts.append(" ")
                self._append_zone(parts)
        else:
            logger.error(f"Unknown format code {self._format!r}")
            raise ValueError(f"Unknown format: {self._format}")

        return "".join(parts)

    @staticmethod
    def _append_date(cal: CalendarFields, parts: list) -> None:
        parts.append(left_pad_with_zeros(cal.year, 4))
        parts.append("-")
        parts.append(left_pad_with_zeros(cal.month, 2))
        parts.append("-")
        parts.append(left_pad_with_zeros(cal.day, 2))

    @staticmethod
    def _append_time(cal: CalendarFields, parts: list) -> None:
        parts.append(left_pad_with_zeros(cal.hour, 2))
        parts.append(":")
        parts.append(left_pad_with_zeros(cal.minute, 2))
        parts.append(":")
        parts.append(left_pad_with_zeros(cal.second, 2))

    def _append_zone(self, parts: list) -> None:
        if self._zone is not None:
            parts.append(zone_label(self._zone))


ISO8601_FULL = DateFormat(FormatCode.ISO8601_FULL)
ISO8601_DATE = DateFormat(FormatCode.ISO8601_DATE)
ISO8601_TIMESTAMP = DateFormat(FormatCode.ISO8601_TIMESTAMP)
NTP = DateFormat(FormatCode.NTP, Settings.SERVER_TZ)
NTP_UTC = DateFormat(FormatCode.NTP, pytz.UTC)
