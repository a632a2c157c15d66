from abc import ABC, abstractmethod

from src.config.roles import Role
from src.errors import NotFoundError
from src.models import Channel, User


class Store(ABC):
    """Persistence used by the standup services.

    Lookups raise NotFoundError for a missing record and StoreError for any
    other failure. Writes are last-writer-wins per record; callers that
    read-modify-write a timetable must serialize per channel member.
    """

    # --- USERS ---
    @abstractmethod
    def select_user(self, user_id):
        ...

    @abstractmethod
    def select_user_by_user_name(self, user_name):
        ...

    @abstractmethod
    def create_user(self, user):
        ...

    @abstractmethod
    def update_user(self, user):
        ...

    @abstractmethod
    def list_admins(self):
        ...

    def ensure_user(self, user_id, user_name):
        """Return the user, creating it on first sight"""
        try:
            return self.select_user(user_id)
        except NotFoundError:
            return self.create_user(User(user_id=user_id, user_name=user_name))

    # --- CHANNELS ---
    @abstractmethod
    def select_channel(self, channel_id):
        ...

    @abstractmethod
    def get_channel_id(self, channel_name):
        ...

    @abstractmethod
    def create_channel(self, channel):
        ...

    @abstractmethod
    def update_channel_standup_time(self, channel_id, standup_time):
        ...

    def ensure_channel(self, channel_id, channel_name):
        """Return the channel, creating it on first sight"""
        try:
            return self.select_channel(channel_id)
        except NotFoundError:
            return self.create_channel(Channel(channel_id=channel_id, channel_name=channel_name))

    # --- CHANNEL MEMBERS ---
    @abstractmethod
    def find_channel_member_by_user_id(self, user_id, channel_id):
        ...

    def find_channel_member_by_user_name(self, user_name, channel_id):
        user = self.select_user_by_user_name(user_name)
        return self.find_channel_member_by_user_id(user.user_id, channel_id)

    @abstractmethod
    def create_channel_member(self, member):
        ...

    @abstractmethod
    def update_channel_member(self, member):
        ...

    @abstractmethod
    def delete_channel_member(self, user_id, channel_id):
        ...

    @abstractmethod
    def list_channel_members(self, channel_id):
        ...

    @abstractmethod
    def list_channel_members_by_role(self, channel_id, role):
        ...

    def user_is_pm_for_project(self, user_id, channel_id):
        try:
            member = self.find_channel_member_by_user_id(user_id, channel_id)
        except NotFoundError:
            return False
        return member.role_in_channel == Role.PM.value

    # --- TIMETABLES ---
    @abstractmethod
    def select_timetable(self, channel_member_id):
        ...

    @abstractmethod
    def create_timetable(self, timetable):
        ...

    @abstractmethod
    def update_timetable(self, timetable):
        ...

    @abstractmethod
    def delete_timetable(self, timetable_id):
        ...

    # --- STANDUPS ---
    @abstractmethod
    def list_standups(self, start, end, user_id=None, channel_id=None):
        """Standups created at or after `start` and before `end` (aware datetimes), oldest first"""
