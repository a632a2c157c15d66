import logging

from src.errors import NotFoundError, StoreError
from src.models import ChannelMember, TimeTable
from src.utils.parsing import format_time, is_mention, parse_time, parse_weekdays, split_user

logger = logging.getLogger(__name__)


class TimetableService:
    """Personal weekly standup deadlines of channel members.

    Setting a timetable only overwrites the weekdays named in the command, so
    successive calls compose. Every mention gets its own answer line, in input
    order, and one mention's failure never stops the others.
    """

    def __init__(self, store, config):
        self.store = store
        self.config = config
        self.translation = config.translation

    def set_timetable(self, mentions, weekday_text, time_text, channel_id):
        # Both raise ValidationError before anything is written
        weekdays = parse_weekdays(weekday_text)
        deadline = parse_time(time_text, self.config.tz)

        lines = []
        for mention in mentions:
            if not is_mention(mention):
                lines.append(self.translation.wrong_username.format(value=mention))
                continue
            user_id, _ = split_user(mention)
            try:
                lines.append(self._set_one(user_id, channel_id, weekdays, deadline))
            except StoreError as e:
                lines.append(self.translation.can_not_update_timetable.format(user=user_id, error=e))
        return "".join(lines)

    def _set_one(self, user_id, channel_id, weekdays, deadline):
        try:
            member = self.store.find_channel_member_by_user_id(user_id, channel_id)
        except NotFoundError:
            member = self.store.create_channel_member(ChannelMember(user_id=user_id, channel_id=channel_id))
            logger.info(f"ChannelMember created! ID: {member.id}")

        created = False
        try:
            timetable = self.store.select_timetable(member.id)
        except NotFoundError:
            logger.info("Timetable for this standuper does not exist. Creating...")
            timetable = self.store.create_timetable(TimeTable(channel_member_id=member.id))
            created = True

        timetable.merge(weekdays, deadline)
        timetable = self.store.update_timetable(timetable)
        logger.info(f"Timetable {'created' if created else 'updated'} id: {timetable.id}")

        template = self.translation.timetable_created if created else self.translation.timetable_updated
        return template.format(user=user_id, timetable=self.render(timetable))

    def show_timetable(self, mentions, channel_id):
        lines = []
        for mention in mentions:
            if not is_mention(mention):
                lines.append(self.translation.wrong_username.format(value=mention))
                continue
            user_id, _ = split_user(mention)
            try:
                member = self.store.find_channel_member_by_user_id(user_id, channel_id)
            except NotFoundError:
                lines.append(self.translation.not_a_standuper.format(user=user_id))
                continue
            try:
                timetable = self.store.select_timetable(member.id)
            except NotFoundError:
                lines.append(self.translation.no_timetable_set.format(user=user_id))
                continue
            lines.append(self.translation.timetable_show.format(user=user_id, timetable=self.render(timetable)))
        return "".join(lines)

    def remove_timetable(self, mentions, channel_id):
        lines = []
        for mention in mentions:
            if not is_mention(mention):
                lines.append(self.translation.wrong_username.format(value=mention))
                continue
            user_id, _ = split_user(mention)
            try:
                member = self.store.find_channel_member_by_user_id(user_id, channel_id)
            except NotFoundError:
                lines.append(self.translation.not_a_standuper.format(user=user_id))
                continue
            try:
                timetable = self.store.select_timetable(member.id)
            except NotFoundError:
                lines.append(self.translation.no_timetable_set.format(user=user_id))
                continue
            try:
                self.store.delete_timetable(timetable.id)
            except StoreError as e:
                lines.append(self.translation.can_not_delete_timetable.format(user=user_id, error=e))
                continue
            logger.info(f"Timetable deleted id: {timetable.id}")
            lines.append(self.translation.timetable_deleted.format(user=user_id))
        return "".join(lines)

    def render(self, timetable):
        """'| Monday 09:00 | Wednesday 09:00 |' for the days with a deadline"""
        names = self.translation.weekday_names
        days = "".join(
            f"| {names[index]} {format_time(deadline, self.config.tz)} "
            for index, deadline in timetable.deadlines()
        )
        return days + "|"
