import logging

from src.config.roles import ACCESS_LEVELS, ADD_ROLE_MAX_LEVEL, DELETE_ROLE_MAX_LEVEL, Role, canonical_role
from src.errors import NotFoundError, StoreError, ValidationError
from src.report_service import ReportService
from src.services.access_service import AccessService
from src.services.membership_service import MembershipService
from src.services.timetable_service import TimetableService
from src.utils.parsing import format_time, parse_date, parse_time, split_role_params, split_timetable_command

logger = logging.getLogger(__name__)


class CommandRouter:
    """Maps `/standup` verbs to services after checking the caller's tier.

    Holds no state between calls: every answer depends only on the store and
    the arguments.
    """

    def __init__(self, store, access_service, membership_service, timetable_service, report_service, config):
        self.store = store
        self.access = access_service
        self.membership = membership_service
        self.timetables = timetable_service
        self.reports = report_service
        self.config = config
        self.translation = config.translation
        self.handlers = {
            "add": self.add_command,
            "delete": self.delete_command,
            "list": self.list_command,
            "add_timetable": self.add_timetable,
            "show_timetable": self.show_timetable,
            "remove_timetable": self.remove_timetable,
            "add_deadline": self.add_deadline,
            "show_deadline": self.show_deadline,
            "remove_deadline": self.remove_deadline,
            "report_on_project": self.report_on_project,
            "report_on_user": self.report_on_user,
            "report_on_user_in_project": self.report_on_user_in_project,
        }

    def handle(self, command, params, caller_id, channel_id):
        try:
            try:
                self.store.select_channel(channel_id)
            except NotFoundError:
                return self.translation.channel_not_registered
            try:
                access_level = self.access.resolve_access_level(caller_id, channel_id)
            except NotFoundError:
                return self.translation.user_not_registered

            handler = self.handlers.get(command)
            if handler is None:
                return self.translation.help_text
            return handler(access_level, caller_id, channel_id, params)
        except ValidationError as e:
            return e.render(self.translation)
        except StoreError as e:
            logger.error(f"{command} failed: {e}")
            return str(e)

    # --- ROLES ---
    def add_command(self, access_level, caller_id, channel_id, params):
        mentions, raw_role = split_role_params(params)
        if not mentions:
            return self.translation.wrong_n_args
        role = canonical_role(raw_role)
        if role is None:
            return self.translation.need_correct_user_role
        denied = self.access.check_access(access_level, ADD_ROLE_MAX_LEVEL[role])
        if denied:
            return denied
        if role == Role.ADMIN:
            return self.membership.add_admins(mentions)
        return self.membership.add_members(mentions, role, channel_id)

    def delete_command(self, access_level, caller_id, channel_id, params):
        mentions, raw_role = split_role_params(params)
        if not mentions:
            return self.translation.wrong_n_args
        role = canonical_role(raw_role)
        if role is None:
            return self.translation.need_correct_user_role
        denied = self.access.check_access(access_level, DELETE_ROLE_MAX_LEVEL[role])
        if denied:
            return denied
        if role == Role.ADMIN:
            return self.membership.delete_admins(mentions)
        return self.membership.delete_members(mentions, channel_id)

    def list_command(self, access_level, caller_id, channel_id, params):
        role = canonical_role(params)
        if role is None:
            return self.translation.need_correct_user_role
        if role == Role.ADMIN:
            return self.membership.list_admins()
        return self.membership.list_members(channel_id, role)

    # --- TIMETABLES ---
    def add_timetable(self, access_level, caller_id, channel_id, params):
        denied = self.access.check_access(access_level, ACCESS_LEVELS["PM"])
        if denied:
            return denied
        users, weekdays, time_text = split_timetable_command(
            params, self.translation.days_divider, self.translation.time_divider
        )
        return self.timetables.set_timetable(users.split(), weekdays, time_text, channel_id)

    def show_timetable(self, access_level, caller_id, channel_id, params):
        mentions = params.split()
        if not mentions:
            return self.translation.wrong_n_args
        return self.timetables.show_timetable(mentions, channel_id)

    def remove_timetable(self, access_level, caller_id, channel_id, params):
        denied = self.access.check_access(access_level, ACCESS_LEVELS["PM"])
        if denied:
            return denied
        mentions = params.split()
        if not mentions:
            return self.translation.wrong_n_args
        return self.timetables.remove_timetable(mentions, channel_id)

    # --- CHANNEL STANDUP TIME ---
    def add_deadline(self, access_level, caller_id, channel_id, params):
        denied = self.access.check_access(access_level, ACCESS_LEVELS["PM"])
        if denied:
            return denied
        standup_time = parse_time(params, self.config.tz)
        self.store.update_channel_standup_time(channel_id, standup_time)
        time_text = params.strip()
        if not self.store.list_channel_members(channel_id):
            return self.translation.add_standup_time_no_users.format(timestamp=standup_time, time=time_text)
        return self.translation.add_standup_time.format(timestamp=standup_time, time=time_text)

    def show_deadline(self, access_level, caller_id, channel_id, params):
        channel = self.store.select_channel(channel_id)
        if not channel.standup_time:
            return self.translation.show_no_standup_time
        return self.translation.show_standup_time.format(
            timestamp=channel.standup_time, time=format_time(channel.standup_time, self.config.tz)
        )

    def remove_deadline(self, access_level, caller_id, channel_id, params):
        denied = self.access.check_access(access_level, ACCESS_LEVELS["PM"])
        if denied:
            return denied
        self.store.update_channel_standup_time(channel_id, 0)
        if self.store.list_channel_members(channel_id):
            return self.translation.remove_standup_time_with_users
        return self.translation.remove_standup_time

    # --- REPORTS ---
    def report_on_project(self, access_level, caller_id, channel_id, params):
        denied = self.access.check_access(access_level, ACCESS_LEVELS["PM"])
        if denied:
            return denied
        args = params.split()
        if len(args) != 3:
            return self.translation.wrong_n_args
        channel = self._find_channel(args[0])
        if channel is None:
            return self.translation.wrong_project_name
        date_from, date_to = parse_date(args[1]), parse_date(args[2])
        return self._render(self.reports.standup_report_by_project(channel, date_from, date_to))

    def report_on_user(self, access_level, caller_id, channel_id, params):
        args = params.split()
        if len(args) != 3:
            return self.translation.wrong_n_args
        try:
            user = self.store.select_user_by_user_name(args[0].replace("@", ""))
        except NotFoundError:
            return self.translation.no_such_user_in_workspace
        if not self._may_view_report(access_level, ACCESS_LEVELS["ADMIN"], caller_id, user.user_id):
            return self.translation.access_at_least_admin_or_owner
        date_from, date_to = parse_date(args[1]), parse_date(args[2])
        return self._render(self.reports.standup_report_by_user(user.user_id, date_from, date_to))

    def report_on_user_in_project(self, access_level, caller_id, channel_id, params):
        args = params.split()
        if len(args) != 4:
            return self.translation.wrong_n_args
        channel = self._find_channel(args[0])
        if channel is None:
            return self.translation.wrong_project_name
        user_name = args[1].replace("@", "")
        try:
            member = self.store.find_channel_member_by_user_name(user_name, channel.channel_id)
        except NotFoundError:
            return self._missing_member_message(user_name)
        if not self._may_view_report(access_level, ACCESS_LEVELS["PM"], caller_id, member.user_id):
            return self.translation.access_at_least_pm_or_owner
        date_from, date_to = parse_date(args[2]), parse_date(args[3])
        return self._render(
            self.reports.standup_report_by_project_and_user(channel, member.user_id, date_from, date_to)
        )

    def _may_view_report(self, access_level, max_level, caller_id, owner_id):
        # Owners see their own reports only when allow_self_reports is on
        if access_level <= max_level:
            return True
        return self.config.allow_self_reports and caller_id == owner_id

    def _missing_member_message(self, user_name):
        try:
            user = self.store.select_user_by_user_name(user_name)
        except NotFoundError:
            return self.translation.no_such_user_in_workspace
        return self.translation.can_not_find_member.format(user=user.user_id)

    def _find_channel(self, channel_name):
        try:
            return self.store.select_channel(self.store.get_channel_id(channel_name.replace("#", "")))
        except NotFoundError as e:
            logger.error(f"GetChannelID failed: {e}")
            return None

    def _render(self, report):
        if not report.body:
            return report.head + self.translation.report_no_data
        return report.head + "".join(report.body)


def create_router(store, messenger, config):
    """Wire the services around one store and messenger"""
    return CommandRouter(
        store,
        AccessService(store, config),
        MembershipService(store, messenger, config),
        TimetableService(store, config),
        ReportService(store, config),
        config,
    )
