import logging
from contextlib import contextmanager

from google.api_core.exceptions import GoogleAPIError, NotFound

from config import COLLECTIONS
from src.config.roles import Role
from src.errors import NotFoundError, StoreError
from src.models import Channel, ChannelMember, Standup, TimeTable, User
from src.services.store import Store

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action):
    try:
        yield
    except GoogleAPIError as e:
        logger.error(f"Firestore {action} failed: {e}")
        raise StoreError(f"{action} failed: {e}") from e


def member_doc_id(user_id, channel_id):
    # One document per (user, channel) pair keeps members unique
    return f"{channel_id}_{user_id}"


class FirestoreStore(Store):
    def __init__(self, db, collections=None):
        collections = collections or COLLECTIONS
        self.db = db
        self.users_collection = db.collection(collections["USERS"])
        self.channels_collection = db.collection(collections["CHANNELS"])
        self.members_collection = db.collection(collections["CHANNEL_MEMBERS"])
        self.timetables_collection = db.collection(collections["TIMETABLES"])
        self.standups_collection = db.collection(collections["STANDUPS"])

    def _get(self, collection, doc_id, what):
        with store_errors(f"select {what}"):
            doc = collection.document(doc_id).get()
        if not doc.exists:
            raise NotFoundError(f"{what} {doc_id} not found")
        return doc

    def _stream(self, query, what):
        with store_errors(f"list {what}"):
            return list(query.stream())

    def _first(self, query, what, key):
        docs = self._stream(query.limit(1), what)
        if not docs:
            raise NotFoundError(f"{what} {key} not found")
        return docs[0]

    # --- USERS ---
    def select_user(self, user_id):
        doc = self._get(self.users_collection, user_id, "user")
        return User.from_dict(doc.to_dict())

    def select_user_by_user_name(self, user_name):
        query = self.users_collection.where("user_name", "==", user_name)
        return User.from_dict(self._first(query, "user", user_name).to_dict())

    def create_user(self, user):
        with store_errors("create user"):
            self.users_collection.document(user.user_id).set(user.to_dict())
        return user

    def update_user(self, user):
        with store_errors("update user"):
            self.users_collection.document(user.user_id).set(user.to_dict(), merge=True)
        return user

    def list_admins(self):
        query = self.users_collection.where("role", "==", Role.ADMIN.value)
        return [User.from_dict(doc.to_dict()) for doc in self._stream(query, "admins")]

    # --- CHANNELS ---
    def select_channel(self, channel_id):
        doc = self._get(self.channels_collection, channel_id, "channel")
        return Channel.from_dict(doc.to_dict(), doc.id)

    def get_channel_id(self, channel_name):
        query = self.channels_collection.where("channel_name", "==", channel_name)
        return self._first(query, "channel", channel_name).to_dict()["channel_id"]

    def create_channel(self, channel):
        channel.id = channel.channel_id
        with store_errors("create channel"):
            self.channels_collection.document(channel.id).set(channel.to_dict())
        return channel

    def update_channel_standup_time(self, channel_id, standup_time):
        with store_errors("update standup time"):
            try:
                self.channels_collection.document(channel_id).update({"standup_time": standup_time})
            except NotFound as e:
                raise NotFoundError(f"channel {channel_id} not found") from e

    # --- CHANNEL MEMBERS ---
    def find_channel_member_by_user_id(self, user_id, channel_id):
        doc = self._get(self.members_collection, member_doc_id(user_id, channel_id), "channel member")
        return ChannelMember.from_dict(doc.to_dict(), doc.id)

    def create_channel_member(self, member):
        member.id = member_doc_id(member.user_id, member.channel_id)
        with store_errors("create channel member"):
            self.members_collection.document(member.id).set(member.to_dict())
        return member

    def update_channel_member(self, member):
        with store_errors("update channel member"):
            self.members_collection.document(member.id).set(member.to_dict(), merge=True)
        return member

    def delete_channel_member(self, user_id, channel_id):
        with store_errors("delete channel member"):
            self.members_collection.document(member_doc_id(user_id, channel_id)).delete()

    def list_channel_members(self, channel_id):
        query = self.members_collection.where("channel_id", "==", channel_id)
        return [ChannelMember.from_dict(doc.to_dict(), doc.id) for doc in self._stream(query, "channel members")]

    def list_channel_members_by_role(self, channel_id, role):
        query = self.members_collection.where("channel_id", "==", channel_id).where("role_in_channel", "==", role)
        return [ChannelMember.from_dict(doc.to_dict(), doc.id) for doc in self._stream(query, "channel members")]

    # --- TIMETABLES ---
    # A timetable shares its document id with its channel member
    def select_timetable(self, channel_member_id):
        doc = self._get(self.timetables_collection, channel_member_id, "timetable")
        return TimeTable.from_dict(doc.to_dict(), doc.id)

    def create_timetable(self, timetable):
        timetable.id = timetable.channel_member_id
        with store_errors("create timetable"):
            self.timetables_collection.document(timetable.id).set(timetable.to_dict())
        return timetable

    def update_timetable(self, timetable):
        with store_errors("update timetable"):
            self.timetables_collection.document(timetable.id).set(timetable.to_dict())
        return timetable

    def delete_timetable(self, timetable_id):
        with store_errors("delete timetable"):
            self.timetables_collection.document(timetable_id).delete()

    # --- STANDUPS ---
    def list_standups(self, start, end, user_id=None, channel_id=None):
        query = self.standups_collection.where("created", ">=", start).where("created", "<", end)
        if user_id:
            query = query.where("user_id", "==", user_id)
        if channel_id:
            query = query.where("channel_id", "==", channel_id)
        docs = self._stream(query.order_by("created"), "standups")
        return [Standup.from_dict(doc.to_dict(), doc.id) for doc in docs]
