"""
Pytest configuration and fixtures for Standup Pulse tests
"""
import itertools
from dataclasses import replace

import pytest

from config import BotConfig
from src.command_router import create_router
from src.config.roles import Role
from src.errors import MessengerError, NotFoundError, StoreError
from src.models import User
from src.services.access_service import AccessService
from src.services.membership_service import MembershipService
from src.services.store import Store
from src.services.timetable_service import TimetableService

MANAGER_ID = "ManagerID"
CHANNEL_ID = "chan1"


class InMemoryStore(Store):
    """Dict-backed store. Returns copies so callers must write back to persist."""

    def __init__(self):
        self.users = {}
        self.channels = {}
        self.members = {}
        self.timetables = {}
        self.standups = []
        self.writes = []
        self.fail_on = set()
        self._ids = itertools.count(1)

    def _call(self, name, write=False):
        if name in self.fail_on:
            raise StoreError(f"{name} failed: connection reset")
        if write:
            self.writes.append(name)

    # --- USERS ---
    def select_user(self, user_id):
        self._call("select_user")
        if user_id not in self.users:
            raise NotFoundError(f"user {user_id} not found")
        return replace(self.users[user_id])

    def select_user_by_user_name(self, user_name):
        self._call("select_user_by_user_name")
        for user in self.users.values():
            if user.user_name == user_name:
                return replace(user)
        raise NotFoundError(f"user {user_name} not found")

    def create_user(self, user):
        self._call("create_user", write=True)
        self.users[user.user_id] = replace(user)
        return user

    def update_user(self, user):
        self._call("update_user", write=True)
        self.users[user.user_id] = replace(user)
        return user

    def list_admins(self):
        self._call("list_admins")
        return [replace(user) for user in self.users.values() if user.is_admin()]

    # --- CHANNELS ---
    def select_channel(self, channel_id):
        self._call("select_channel")
        if channel_id not in self.channels:
            raise NotFoundError(f"channel {channel_id} not found")
        return replace(self.channels[channel_id])

    def get_channel_id(self, channel_name):
        self._call("get_channel_id")
        for channel in self.channels.values():
            if channel.channel_name == channel_name:
                return channel.channel_id
        raise NotFoundError(f"channel {channel_name} not found")

    def create_channel(self, channel):
        self._call("create_channel", write=True)
        channel.id = channel.channel_id
        self.channels[channel.channel_id] = replace(channel)
        return channel

    def update_channel_standup_time(self, channel_id, standup_time):
        self._call("update_channel_standup_time", write=True)
        self.channels[channel_id].standup_time = standup_time

    # --- CHANNEL MEMBERS ---
    def find_channel_member_by_user_id(self, user_id, channel_id):
        self._call("find_channel_member_by_user_id")
        if (user_id, channel_id) not in self.members:
            raise NotFoundError(f"channel member {user_id} not found")
        return replace(self.members[(user_id, channel_id)])

    def create_channel_member(self, member):
        self._call("create_channel_member", write=True)
        member.id = str(next(self._ids))
        self.members[(member.user_id, member.channel_id)] = replace(member)
        return member

    def update_channel_member(self, member):
        self._call("update_channel_member", write=True)
        self.members[(member.user_id, member.channel_id)] = replace(member)
        return member

    def delete_channel_member(self, user_id, channel_id):
        self._call("delete_channel_member", write=True)
        self.members.pop((user_id, channel_id), None)

    def list_channel_members(self, channel_id):
        self._call("list_channel_members")
        return [replace(m) for m in self.members.values() if m.channel_id == channel_id]

    def list_channel_members_by_role(self, channel_id, role):
        self._call("list_channel_members_by_role")
        return [
            replace(m) for m in self.members.values()
            if m.channel_id == channel_id and m.role_in_channel == role
        ]

    # --- TIMETABLES ---
    def select_timetable(self, channel_member_id):
        self._call("select_timetable")
        for timetable in self.timetables.values():
            if timetable.channel_member_id == channel_member_id:
                return replace(timetable)
        raise NotFoundError(f"timetable for {channel_member_id} not found")

    def create_timetable(self, timetable):
        self._call("create_timetable", write=True)
        timetable.id = f"tt{next(self._ids)}"
        self.timetables[timetable.id] = replace(timetable)
        return timetable

    def update_timetable(self, timetable):
        self._call("update_timetable", write=True)
        self.timetables[timetable.id] = replace(timetable)
        return timetable

    def delete_timetable(self, timetable_id):
        self._call("delete_timetable", write=True)
        del self.timetables[timetable_id]

    # --- STANDUPS ---
    def list_standups(self, start, end, user_id=None, channel_id=None):
        self._call("list_standups")
        return sorted(
            (
                s for s in self.standups
                if start <= s.created < end
                and (user_id is None or s.user_id == user_id)
                and (channel_id is None or s.channel_id == channel_id)
            ),
            key=lambda s: s.created,
        )

    # --- helpers for tests ---
    def add_user(self, user_id, user_name="", role=Role.NONE):
        self.users[user_id] = User(user_id=user_id, user_name=user_name or user_id, role=role.value)


class RecordingMessenger:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send_user_message(self, user_id, text):
        if self.fail:
            raise MessengerError(f"Could not message {user_id}: channel_not_found")
        self.sent.append((user_id, text))


@pytest.fixture
def config():
    return BotConfig(manager_id=MANAGER_ID, timezone="UTC")


@pytest.fixture
def store():
    store = InMemoryStore()
    store.ensure_channel(CHANNEL_ID, "general")
    store.writes.clear()
    return store


@pytest.fixture
def messenger():
    return RecordingMessenger()


@pytest.fixture
def access_service(store, config):
    return AccessService(store, config)


@pytest.fixture
def membership_service(store, messenger, config):
    return MembershipService(store, messenger, config)


@pytest.fixture
def timetable_service(store, config):
    return TimetableService(store, config)


@pytest.fixture
def router(store, messenger, config):
    return create_router(store, messenger, config)
