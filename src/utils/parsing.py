import re
from datetime import datetime, time

from src.errors import ValidationError
from src.models import WEEKDAYS

# <@U123|name> or the bare <@U123> form
MENTION_RE = re.compile(r"<@([A-Za-z0-9]+)(?:\|([^<>|]+))?>")
TIME_RE = re.compile(r"(\d{1,2}):(\d{2})")

# Weekday tokens in every supported language
WEEKDAY_ALIASES = {
    "monday": ("mon", "monday", "пн", "понедельник"),
    "tuesday": ("tue", "tues", "tuesday", "вт", "вторник"),
    "wednesday": ("wed", "wednesday", "ср", "среда"),
    "thursday": ("thu", "thurs", "thursday", "чт", "четверг"),
    "friday": ("fri", "friday", "пт", "пятница"),
    "saturday": ("sat", "saturday", "сб", "суббота"),
    "sunday": ("sun", "sunday", "вс", "воскресенье"),
}
WEEKDAY_LOOKUP = {alias: day for day, aliases in WEEKDAY_ALIASES.items() for alias in aliases}


def parse_command(text):
    """Split slash command text into the verb and the rest of the text"""
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    command = parts[0].lower()
    params = parts[1].strip() if len(parts) > 1 else ""
    return command, params


def is_mention(token):
    return MENTION_RE.fullmatch(token) is not None


def split_user(token):
    """Return (user_id, user_name) of a mention; user_name falls back to user_id"""
    match = MENTION_RE.fullmatch(token)
    if not match:
        raise ValidationError("wrong_username", token)
    user_id, user_name = match.groups()
    return user_id, user_name or user_id


def split_role_params(params):
    """'<mentions> / role' -> (mention tokens, raw role). No role part gives an empty role."""
    mentions, _, role = params.partition("/")
    return mentions.split(), role.strip()


def split_timetable_command(params, days_divider, time_divider):
    """'<mentions> on <weekdays> at <HH:MM>' -> (mentions text, weekdays text, time text)"""
    users_and_days = re.split(rf"\s+{re.escape(days_divider)}\s+", params, maxsplit=1, flags=re.IGNORECASE)
    if len(users_and_days) != 2:
        raise ValidationError("wrong_timetable_command")
    users, rest = users_and_days
    days_and_time = re.split(rf"\s+{re.escape(time_divider)}\s+", rest, maxsplit=1, flags=re.IGNORECASE)
    if len(days_and_time) != 2:
        raise ValidationError("wrong_timetable_command")
    weekdays, time_text = days_and_time
    return users.strip(), weekdays.strip(), time_text.strip()


def parse_weekdays(text):
    """Weekday field names named in text, in the order given, without repeats"""
    weekdays = []
    for token in re.split(r"[\s,]+", text.strip().lower()):
        if not token:
            continue
        if token not in WEEKDAY_LOOKUP:
            raise ValidationError("wrong_weekday", token)
        day = WEEKDAY_LOOKUP[token]
        if day not in weekdays:
            weekdays.append(day)
    if not weekdays:
        raise ValidationError("no_weekdays")
    return weekdays


def parse_time(text, tz):
    """Unix timestamp of today's HH:MM in tz"""
    match = TIME_RE.fullmatch(text.strip())
    if not match:
        raise ValidationError("wrong_time_format", text)
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValidationError("wrong_time_format", text)
    today = datetime.now(tz).date()
    return int(tz.localize(datetime.combine(today, time(hours, minutes))).timestamp())


def format_time(timestamp, tz):
    return datetime.fromtimestamp(timestamp, tz).strftime("%H:%M")


def parse_date(text):
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("wrong_date", text)
