# tests/test_formatter.py

import pytest
import random
import string
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from phpdate.core.errors import InvalidArgumentError
from phpdate.core.types import Instant
from phpdate.engines.formatter import FormatEngine, ISO_8601, RFC_2822

ENGINE = FormatEngine()
fmt = ENGINE.format

# 2010-06-10 14:21:56.123 UTC, a Thursday
MS = 1276179716123
UTC_I = Instant.from_epoch_ms(MS, timezone.utc)

ZONES = [
    timezone.utc,
    ZoneInfo("Europe/Berlin"),
    ZoneInfo("America/New_York"),
    ZoneInfo("Australia/Sydney"),
    ZoneInfo("Asia/Kolkata"),
    ZoneInfo("America/St_Johns"),
    timezone(timedelta(hours=-9, minutes=-30)),
]


@pytest.mark.parametrize("code, expected", [
    ("d", "10"), ("D", "Thu"), ("j", "10"), ("l", "Thursday"), ("N", "4"),
    ("S", "th"), ("w", "4"), ("z", "160"),
    ("W", "23"),
    ("F", "June"), ("m", "06"), ("M", "Jun"), ("n", "6"), ("t", "30"),
    ("L", "0"), ("o", "2010"), ("Y", "2010"), ("y", "10"),
    ("a", "pm"), ("A", "PM"), ("B", "640"), ("g", "2"), ("G", "14"), ("h", "02"),
    ("H", "14"), ("i", "21"), ("s", "56"), ("u", "123000"), ("v", "123"),
    ("I", "0"), ("O", "+0000"), ("P", "+00:00"), ("Z", "0"),
    ("c", "2010-06-10T14:21:56+00:00"),
    ("r", "Thu, 10 Jun 2010 14:21:56 +0000"),
    ("U", "1276179716"),
])
def test_every_directive_utc(code, expected):
    assert fmt(UTC_I, code) == expected

def test_known_scenario_berlin():
    i = Instant.from_epoch_ms(MS, ZoneInfo("Europe/Berlin"))
    assert fmt(i, "Y-m-d H:i:s") == "2010-06-10 16:21:56"
    assert fmt(i, "I O P Z") == "1 +0200 +02:00 7200"
    assert fmt(i, "c") == "2010-06-10T16:21:56+02:00"
    assert fmt(i, "r") == "Thu, 10 Jun 2010 16:21:56 +0200"
    assert fmt(i, "B U") == "640 1276179716"

def test_known_scenario_new_york():
    i = Instant.from_epoch_ms(MS, ZoneInfo("America/New_York"))
    assert fmt(i, "H:i a") == "10:21 am"
    assert fmt(i, "I P Z") == "1 -04:00 -14400"

def test_southern_hemisphere_dst():
    sydney = ZoneInfo("Australia/Sydney")
    summer = Instant.from_epoch_ms(1262260800000, sydney)   # 2009-12-31 12:00 UTC
    winter = Instant.from_epoch_ms(MS, sydney)
    assert fmt(summer, "Y-m-d H:i I P") == "2010-01-01 23:00 1 +11:00"
    assert fmt(summer, "W o") == "53 2009"
    assert fmt(winter, "D d g h a I P") == "Fri 11 12 12 am 0 +10:00"

def test_half_hour_offsets():
    kolkata = Instant.from_epoch_ms(MS, ZoneInfo("Asia/Kolkata"))
    assert fmt(kolkata, "H:i P O Z I") == "19:51 +05:30 +0530 19800 0"
    st_johns = Instant.from_epoch_ms(1262260800000, ZoneInfo("America/St_Johns"))
    assert fmt(st_johns, "Y-m-d H:i P O Z I") == "2009-12-31 08:30 -03:30 -0330 -12600 0"

def test_epoch_zero():
    i = Instant.from_epoch_ms(0, timezone.utc)
    assert fmt(i, "D, d M Y") == "Thu, 01 Jan 1970"
    assert fmt(i, "W o z B") == "01 1970 0 041"
    assert fmt(i, "g h G H a A") == "12 12 0 00 am AM"

def test_noon_and_afternoon():
    noon = Instant.from_epoch_ms(43200 * 1000, timezone.utc)
    assert fmt(noon, "g h G a") == "12 12 12 pm"
    later = Instant.from_epoch_ms(47109 * 1000, timezone.utc)
    assert fmt(later, "g:i:s A h") == "1:05:09 PM 01"

def test_swatch_wraps():
    assert fmt(Instant.from_epoch_ms(82800 * 1000, timezone.utc), "B") == "000"

def test_millisecond_padding():
    i = Instant.from_epoch_ms(5, timezone.utc)
    assert fmt(i, "u v") == "005000 005"
    i = Instant.from_epoch_ms(-1, timezone.utc)
    assert fmt(i, "Y-m-d H:i:s v U") == "1969-12-31 23:59:59 999 -1"

@pytest.mark.parametrize("day, suffix", [
    (1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"),
    (21, "st"), (22, "nd"), (23, "rd"), (24, "th"), (30, "th"), (31, "st"),
])
def test_ordinal_suffix(day, suffix):
    i = Instant.from_datetime(datetime(2021, 1, day, tzinfo=timezone.utc))
    assert fmt(i, "jS") == f"{day}{suffix}"

def test_leap_year_directives():
    leap = Instant.from_datetime(datetime(2000, 2, 1, tzinfo=timezone.utc))
    common = Instant.from_datetime(datetime(1900, 2, 1, tzinfo=timezone.utc))
    assert fmt(leap, "L t") == "1 29"
    assert fmt(common, "L t") == "0 28"

def test_short_years_are_padded():
    i = Instant.from_datetime(datetime(999, 6, 1, tzinfo=timezone.utc))
    assert fmt(i, "Y y") == "0999 99"
    i = Instant.from_datetime(datetime(2005, 6, 1, tzinfo=timezone.utc))
    assert fmt(i, "y") == "05"

def test_iso_year_in_pattern():
    i = Instant.from_datetime(datetime(2005, 1, 1, tzinfo=timezone.utc))
    assert fmt(i, "o-W-N") == "2004-53-6"

def test_unsupported_directives_pass_through():
    assert fmt(UTC_I, "e T") == "e T"

def test_no_escape_character():
    # a backslash does not protect the next character
    assert fmt(UTC_I, "\\o\\d") == "\\2010\\10"

def test_passthrough_of_non_directives():
    keys = set(ENGINE.keys())
    alphabet = [c for c in string.printable + "äßé日本–" if c not in keys]
    random.seed(7)
    for _ in range(200):
        s = "".join(random.choice(alphabet) for _ in range(random.randint(0, 40)))
        for tz in ZONES:
            assert fmt(Instant.from_epoch_ms(MS, tz), s) == s

def test_composite_directives_delegate():
    random.seed(11)
    for _ in range(200):
        ms = random.randint(-2_000_000_000_000, 4_000_000_000_000)
        for tz in ZONES:
            i = Instant.from_epoch_ms(ms, tz)
            assert fmt(i, "c") == fmt(i, ISO_8601)
            assert fmt(i, "r") == fmt(i, RFC_2822)

def test_unix_seconds_round_trip():
    random.seed(3)
    for _ in range(500):
        ms = random.randint(-2_000_000_000_000, 4_000_000_000_000)
        i = Instant.from_epoch_ms(ms, ZoneInfo("Europe/Berlin"))
        back = Instant.from_epoch_ms(int(fmt(i, "U")) * 1000, timezone.utc)
        assert back.epoch_ms == ms // 1000 * 1000

def test_format_is_stateless():
    a = fmt(UTC_I, "c r U")
    fmt(Instant.from_epoch_ms(0, ZoneInfo("Asia/Kolkata")), "c r U I")
    assert fmt(UTC_I, "c r U") == a

def test_directive_table_is_read_only():
    with pytest.raises(TypeError):
        ENGINE.directives["d"] = lambda d: "x"

def test_custom_table_gets_composites():
    engine = FormatEngine({"Y": lambda d: str(d.year), "m": lambda d: str(d.month + 1),
                           "d": lambda d: str(d.day), "T": lambda d: "T", "H": lambda d: "H",
                           "i": lambda d: "i", "s": lambda d: "s", "P": lambda d: "P"})
    assert engine.format(UTC_I, "Y/m/d") == "2010/6/10"
    assert engine.format(UTC_I, "c") == "2010-6-10TH:i:sP"
    assert "c" in engine.keys() and "r" in engine.keys()

@pytest.mark.parametrize("pattern", [None, 42, b"Y-m-d", ["Y"]])
def test_pattern_must_be_str(pattern):
    with pytest.raises(InvalidArgumentError):
        fmt(UTC_I, pattern)

def test_instant_required():
    with pytest.raises(InvalidArgumentError):
        fmt(datetime(2010, 1, 1), "Y")

def test_bad_custom_key():
    with pytest.raises(InvalidArgumentError):
        FormatEngine({"YY": lambda d: ""})
