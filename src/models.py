from dataclasses import asdict, dataclass, field, fields
from datetime import datetime

import pytz

from src.config.roles import Role

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def utc_now():
    return datetime.now(pytz.UTC)


class Document:
    """Conversion between dataclasses and Firestore documents"""

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data, doc_id=None):
        values = {f.name: data[f.name] for f in fields(cls) if f.name in data}
        if doc_id is not None and "id" in {f.name for f in fields(cls)}:
            values["id"] = doc_id
        return cls(**values)


@dataclass
class User(Document):
    user_id: str
    user_name: str = ""
    role: str = Role.NONE.value

    def is_admin(self):
        return self.role == Role.ADMIN.value


@dataclass
class Channel(Document):
    channel_id: str
    channel_name: str = ""
    standup_time: int = 0
    id: str = ""


@dataclass
class ChannelMember(Document):
    user_id: str
    channel_id: str
    role_in_channel: str = Role.NONE.value
    created: datetime = field(default_factory=utc_now)
    id: str = ""


@dataclass
class TimeTable(Document):
    """Weekly deadlines of one channel member. A zero deadline means no standup that day."""
    channel_member_id: str
    monday: int = 0
    tuesday: int = 0
    wednesday: int = 0
    thursday: int = 0
    friday: int = 0
    saturday: int = 0
    sunday: int = 0
    created: datetime = field(default_factory=utc_now)
    modified: datetime = field(default_factory=utc_now)
    id: str = ""

    def merge(self, weekdays, deadline):
        """Overwrite only the given weekdays, keeping the others"""
        for day in weekdays:
            setattr(self, day, deadline)
        self.modified = utc_now()

    def deadlines(self):
        """(weekday index, deadline) pairs for the days a standup is owed, Monday first"""
        return [(i, getattr(self, day)) for i, day in enumerate(WEEKDAYS) if getattr(self, day)]


@dataclass
class Standup(Document):
    user_id: str
    channel_id: str
    comment: str = ""
    created: datetime = field(default_factory=utc_now)
    id: str = ""
