"""
Tests for command, mention, weekday and time parsing
"""
import pytest
import pytz

from src.errors import ValidationError
from src.utils.parsing import (
    format_time,
    is_mention,
    parse_command,
    parse_date,
    parse_time,
    parse_weekdays,
    split_role_params,
    split_timetable_command,
    split_user,
)


@pytest.mark.parametrize("token, expected", [
    ("<@U123|john>", ("U123", "john")),
    ("<@userID|testUser>", ("userID", "testUser")),
    ("<@U123>", ("U123", "U123")),
    ("<@U123|john.doe>", ("U123", "john.doe")),
])
def test_split_user(token, expected):
    assert split_user(token) == expected


@pytest.mark.parametrize("token", ["plainword", "<>", "@john", "<@>", "<@U1|a><@U2|b>", "<#C123|general>"])
def test_malformed_mentions(token):
    assert not is_mention(token)
    with pytest.raises(ValidationError):
        split_user(token)


def test_parse_command():
    assert parse_command("add <@U1|a> / pm") == ("add", "<@U1|a> / pm")
    assert parse_command("  LIST  ") == ("list", "")
    assert parse_command("") == ("", "")


def test_split_role_params():
    assert split_role_params("<@U1|a> <@U2|b> / pm") == (["<@U1|a>", "<@U2|b>"], "pm")
    assert split_role_params("<@U1|a>") == (["<@U1|a>"], "")


def test_split_timetable_command():
    users, weekdays, time_text = split_timetable_command("<@U1|a> <@U2|b> on mon tue at 10:00", "on", "at")
    assert users == "<@U1|a> <@U2|b>"
    assert weekdays == "mon tue"
    assert time_text == "10:00"


def test_split_timetable_command_russian():
    assert split_timetable_command("<@U1|a> по пн ср в 09:30", "по", "в") == ("<@U1|a>", "пн ср", "09:30")


def test_split_timetable_command_without_dividers():
    with pytest.raises(ValidationError) as exc:
        split_timetable_command("<@U1|a> mon 10:00", "on", "at")
    assert exc.value.code == "wrong_timetable_command"


def test_parse_weekdays():
    assert parse_weekdays("Mon Wed") == ["monday", "wednesday"]
    assert parse_weekdays("friday, sat,sun mon") == ["friday", "saturday", "sunday", "monday"]
    assert parse_weekdays("пн пн чт") == ["monday", "thursday"]


def test_parse_weekdays_rejects_unknown_token():
    with pytest.raises(ValidationError) as exc:
        parse_weekdays("mon funday")
    assert exc.value.code == "wrong_weekday"
    assert exc.value.value == "funday"


def test_parse_weekdays_requires_a_day():
    with pytest.raises(ValidationError) as exc:
        parse_weekdays("  ")
    assert exc.value.code == "no_weekdays"


@pytest.mark.parametrize("text", ["09:00", "9:05", "23:59", "00:00"])
def test_parse_time_round_trip(text):
    tz = pytz.timezone("Asia/Bishkek")
    timestamp = parse_time(text, tz)
    assert timestamp > 0
    hours, minutes = text.split(":")
    assert format_time(timestamp, tz) == f"{int(hours):02d}:{minutes}"


@pytest.mark.parametrize("text", ["24:00", "12:60", "noon", "1200", "12:5", ""])
def test_parse_time_rejects_bad_tokens(text):
    with pytest.raises(ValidationError) as exc:
        parse_time(text, pytz.UTC)
    assert exc.value.code == "wrong_time_format"


def test_parse_date():
    assert parse_date("2024-02-29").isoformat() == "2024-02-29"
    with pytest.raises(ValidationError):
        parse_date("29.02.2024")
