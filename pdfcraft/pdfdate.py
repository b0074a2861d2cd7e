"""PDF date strings such as ``D:199812231952-08'00'``."""

import re
from datetime import datetime, timedelta, timezone

from .errors import ObjectTypeError
from .objects import as_str, string_literal

_DATE_RE = re.compile(
    r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"
    r"(?:(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})?)?"
    r"(?P<tz>Z|[+-]\d{2}(?:\d{2})?)?"
)


def _stamp(dt):
    return (
        f"D:{dt.year:04d}{dt.month:02d}{dt.day:02d}"
        f"{dt.hour:02d}{dt.minute:02d}{dt.second:02d}"
    )


def to_pdf_date(dt):
    """Format a datetime as a PDF date string object.

    UTC datetimes end in ``Z``; other aware datetimes carry their offset as
    ``+HH'MM'``. Naive datetimes are taken as local time.
    """
    if dt.tzinfo is None:
        dt = dt.astimezone()
    if dt.tzinfo is timezone.utc:
        return string_literal(_stamp(dt) + "Z")
    minutes_total = int(dt.utcoffset().total_seconds()) // 60
    sign = "+" if minutes_total >= 0 else "-"
    hours, minutes = divmod(abs(minutes_total), 60)
    return string_literal(f"{_stamp(dt)}{sign}{hours:02d}'{minutes:02d}'")


def datetime_string(obj):
    """Return the date text of a string object without ``D``, ``:`` and ``'``.

    Returns None if ``obj`` is not a string or is not valid UTF-8.
    """
    try:
        data = as_str(obj)
    except ObjectTypeError:
        return None
    filtered = bytes(b for b in data if b not in b"D:'")
    try:
        return filtered.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _zone(text):
    if text is None or text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours = int(text[1:3])
    minutes = int(text[3:5]) if len(text) > 3 else 0
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_pdf_date(text):
    """Parse date text (as produced by :func:`datetime_string`) into an aware datetime.

    Seconds, the time of day and the time zone may be left out; without a
    zone the time is taken as UTC. Raises ValueError on malformed input.
    """
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid PDF date: {text!r}")
    parts = match.groupdict()
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts["hour"] or 0),
        int(parts["minute"] or 0),
        int(parts["second"] or 0),
        tzinfo=_zone(parts["tz"]),
    )


def as_datetime(obj):
    """Parse a PDF date string object; None if it is not a valid date."""
    text = datetime_string(obj)
    if text is None:
        return None
    try:
        return parse_pdf_date(text)
    except ValueError:
        return None