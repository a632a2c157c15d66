import logging

from src.config.roles import Role
from src.errors import MessengerError, NotFoundError
from src.models import ChannelMember
from src.utils.buckets import classify_into_buckets
from src.utils.parsing import is_mention, split_user

logger = logging.getLogger(__name__)


class MembershipService:
    """Assigns, removes and lists channel roles and workspace admins.

    Batch operations take raw mention tokens and report each one in a bucket:
    malformed or unknown users are never errors, only a line in the answer.
    Store errors propagate.
    """

    def __init__(self, store, messenger, config):
        self.store = store
        self.messenger = messenger
        self.translation = config.translation

    def add_members(self, mentions, role, channel_id):
        """Give each mentioned user `role` (PM or DEVELOPER) in the channel"""
        if role not in (Role.PM, Role.DEVELOPER):
            raise ValueError(f"Invalid channel role: {role}")

        def classify(mention):
            if not is_mention(mention):
                return "failed"
            user_id, _ = split_user(mention)
            try:
                member = self.store.find_channel_member_by_user_id(user_id, channel_id)
            except NotFoundError:
                member = self.store.create_channel_member(ChannelMember(
                    user_id=user_id,
                    channel_id=channel_id,
                    role_in_channel=role.value
                ))
                logger.info(f"ChannelMember created! ID: {member.id}")
                return "added"
            if member.role_in_channel == role.value:
                return "exist"
            member.role_in_channel = role.value
            self.store.update_channel_member(member)
            logger.info(f"ChannelMember {member.id} role changed to {role.value}")
            return "added"

        t = self.translation
        if role == Role.PM:
            templates = {"failed": t.add_pms_failed, "exist": t.add_pms_exist, "added": t.add_pms_added}
        else:
            templates = {"failed": t.add_members_failed, "exist": t.add_members_exist, "added": t.add_members_added}
        return classify_into_buckets(mentions, classify, templates)

    def add_admins(self, mentions):
        def classify(mention):
            if not is_mention(mention):
                return "failed"
            user_id, _ = split_user(mention)
            try:
                user = self.store.select_user(user_id)
            except NotFoundError:
                return "failed"
            if user.is_admin():
                return "exist"
            user.role = Role.ADMIN.value
            self.store.update_user(user)
            self._notify(user_id, self.translation.admin_assigned)
            return "added"

        t = self.translation
        templates = {"failed": t.add_admins_failed, "exist": t.add_admins_exist, "added": t.add_admins_added}
        return classify_into_buckets(mentions, classify, templates)

    def delete_members(self, mentions, channel_id):
        """Remove members from the channel. Their timetables stay until removed explicitly."""
        def classify(mention):
            if not is_mention(mention):
                return "failed"
            user_id, _ = split_user(mention)
            try:
                member = self.store.find_channel_member_by_user_id(user_id, channel_id)
            except NotFoundError:
                return "failed"
            self.store.delete_channel_member(member.user_id, channel_id)
            return "deleted"

        t = self.translation
        templates = {"failed": t.delete_members_failed, "deleted": t.delete_members_deleted}
        return classify_into_buckets(mentions, classify, templates)

    def delete_admins(self, mentions):
        def classify(mention):
            if not is_mention(mention):
                return "failed"
            user_id, _ = split_user(mention)
            try:
                user = self.store.select_user(user_id)
            except NotFoundError:
                return "failed"
            if not user.is_admin():
                return "failed"
            user.role = Role.NONE.value
            self.store.update_user(user)
            self._notify(user_id, self.translation.admin_removed)
            return "deleted"

        t = self.translation
        templates = {"failed": t.delete_admins_failed, "deleted": t.delete_admins_deleted}
        return classify_into_buckets(mentions, classify, templates)

    def list_members(self, channel_id, role):
        members = self.store.list_channel_members_by_role(channel_id, role.value)
        users = ", ".join(f"<@{member.user_id}>" for member in members)
        t = self.translation
        if role == Role.PM:
            return t.list_pms.format(users=users) if members else t.list_no_pms
        return t.list_standupers.format(users=users) if members else t.list_no_standupers

    def list_admins(self):
        admins = self.store.list_admins()
        if not admins:
            return self.translation.list_no_admins
        return self.translation.list_admins.format(users=", ".join(f"<@{admin.user_id}>" for admin in admins))

    def _notify(self, user_id, text):
        # The role change stays committed even if the message is lost
        try:
            self.messenger.send_user_message(user_id, text)
        except MessengerError as e:
            logger.error(f"SendUserMessage to {user_id} failed: {e}")
