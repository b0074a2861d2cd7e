from datetime import datetime, timedelta, timezone

import pytest

from pdfcraft.objects import Name, string_literal
from pdfcraft.pdfdate import as_datetime, datetime_string, parse_pdf_date, to_pdf_date


def test_utc_round_trip():
    time = datetime.now(timezone.utc).replace(microsecond=0)
    text = to_pdf_date(time)
    assert as_datetime(text) == time


def test_utc_format():
    time = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
    assert to_pdf_date(time).data == b"D:20240305070809Z"


def test_offset_round_trip_keeps_offset():
    zone = timezone(timedelta(hours=5, minutes=30))
    time = datetime(2021, 6, 1, 12, 0, 0, tzinfo=zone)
    parsed = as_datetime(to_pdf_date(time))
    assert parsed == time
    assert parsed.utcoffset() == zone.utcoffset(None)


def test_offset_format_uses_apostrophes():
    zone = timezone(-timedelta(hours=8))
    time = datetime(1998, 12, 23, 19, 52, 0, tzinfo=zone)
    assert to_pdf_date(time).data == b"D:19981223195200-08'00'"


def test_local_round_trip():
    time = datetime.now().astimezone().replace(microsecond=0)
    assert as_datetime(to_pdf_date(time)) == time


def test_naive_is_local_time():
    time = datetime(2020, 1, 2, 3, 4, 5)
    assert as_datetime(to_pdf_date(time)) == time.astimezone()


def test_seconds_missing():
    text = string_literal("D:199812231952-08'00'")
    expected = datetime(1998, 12, 23, 19, 52, tzinfo=timezone(-timedelta(hours=8)))
    assert as_datetime(text) == expected


def test_time_missing():
    text = string_literal("D:20040229")
    assert as_datetime(text) == datetime(2004, 2, 29, tzinfo=timezone.utc)


def test_datetime_string_strips_markers():
    assert datetime_string(string_literal("D:199812231952-08'00'")) == "199812231952-0800"


def test_datetime_string_not_a_string():
    assert datetime_string(42) is None
    assert datetime_string(Name("D:2020")) is None


def test_as_datetime_rejects_garbage():
    assert as_datetime(string_literal("D:not a date")) is None
    assert as_datetime(3.5) is None


def test_parse_invalid_day():
    with pytest.raises(ValueError):
        parse_pdf_date("20230230")


def test_parse_malformed():
    with pytest.raises(ValueError):
        parse_pdf_date("2023")