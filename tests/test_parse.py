# tests/test_parse.py

import pytest

from agecalc import DateTimeComponents, ErrorKind, FormatError, parse_datetime


def test_full_datetime():
    assert parse_datetime("24.12.2023-18:05:09") == DateTimeComponents(24, 12, 2023, 18, 5, 9)


def test_time_only_defaults_date():
    assert parse_datetime("10:30:00") == DateTimeComponents(1, 1, 1970, 10, 30, 0)


def test_date_only_defaults_time():
    assert parse_datetime("01.01.2024") == DateTimeComponents(1, 1, 2024, 0, 0, 0)


def test_leading_zeros_optional():
    assert parse_datetime("1.2.2024-3:4:5") == DateTimeComponents(1, 2, 2024, 3, 4, 5)


def test_no_range_validation():
    dt = parse_datetime("31.13.2024-25:75:99")
    assert (dt.month, dt.hour, dt.minute, dt.second) == (13, 25, 75, 99)


def test_two_digit_year_taken_as_is():
    assert parse_datetime("01.01.24").year == 24


@pytest.mark.parametrize(
    "s, kind",
    [
        ("", ErrorKind.TOO_MANY_SEPARATORS),
        ("01.01.2024-10:00:00-x", ErrorKind.TOO_MANY_SEPARATORS),
        ("2024", ErrorKind.UNRECOGNIZED_SEGMENT),
        ("yesterday", ErrorKind.UNRECOGNIZED_SEGMENT),
        ("1.2-10:00:00", ErrorKind.BAD_DATE_SHAPE),
        ("01.xx.2024", ErrorKind.BAD_DATE_SHAPE),
        ("01..2024-10:00:00", ErrorKind.BAD_DATE_SHAPE),
        ("01.01.2024-10:00", ErrorKind.BAD_TIME_SHAPE),
        ("01.01.2024-", ErrorKind.BAD_TIME_SHAPE),
        ("10:aa:00", ErrorKind.BAD_TIME_SHAPE),
        ("1_0.01.2024", ErrorKind.BAD_DATE_SHAPE),
        ("01.01.\uff12\uff10\uff12\uff14", ErrorKind.BAD_DATE_SHAPE),
        ("10:\u0663\u0660:00", ErrorKind.BAD_TIME_SHAPE),
        ("0x1.01.2024", ErrorKind.BAD_DATE_SHAPE),
    ],
)
def test_structural_errors(s, kind):
    with pytest.raises(FormatError) as exc:
        parse_datetime(s)
    assert exc.value.kind is kind
    assert exc.value.code == int(kind)


def test_str_roundtrip_format():
    assert str(parse_datetime("1.2.2024-3:4:5")) == "01.02.2024-03:04:05"


def test_signs_and_padding_accepted():
    assert parse_datetime(" 1.+2. 2024") == DateTimeComponents(1, 2, 2024)
