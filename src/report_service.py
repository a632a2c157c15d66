from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta

from src.errors import ValidationError


@dataclass
class Report:
    head: str
    body: list = field(default_factory=list)


class ReportService:
    """Collects submitted standups for a period into day-by-day reports"""

    def __init__(self, store, config):
        self.store = store
        self.config = config
        self.translation = config.translation

    def standup_report_by_project(self, channel, date_from, date_to):
        head = self.translation.report_on_project_head.format(
            channel=channel.channel_name, date_from=date_from, date_to=date_to
        )
        standups = self._standups(date_from, date_to, channel_id=channel.channel_id)
        return Report(head, self._body(standups))

    def standup_report_by_user(self, user_id, date_from, date_to):
        head = self.translation.report_on_user_head.format(user=user_id, date_from=date_from, date_to=date_to)
        standups = self._standups(date_from, date_to, user_id=user_id)
        return Report(head, self._body(standups))

    def standup_report_by_project_and_user(self, channel, user_id, date_from, date_to):
        head = self.translation.report_on_project_and_user_head.format(
            user=user_id, channel=channel.channel_name, date_from=date_from, date_to=date_to
        )
        standups = self._standups(date_from, date_to, user_id=user_id, channel_id=channel.channel_id)
        return Report(head, self._body(standups))

    def _standups(self, date_from, date_to, user_id=None, channel_id=None):
        if date_from > date_to:
            raise ValidationError("wrong_date_range", date_from.isoformat())
        # Local midnight of date_from up to local midnight after date_to
        tz = self.config.tz
        start = tz.localize(datetime.combine(date_from, time.min))
        end = tz.localize(datetime.combine(date_to + timedelta(days=1), time.min))
        return self.store.list_standups(start, end, user_id=user_id, channel_id=channel_id)

    def _body(self, standups):
        by_day = defaultdict(list)
        for standup in standups:
            by_day[standup.created.astimezone(self.config.tz).date()].append(standup)

        body = []
        for day in sorted(by_day):
            text = self.translation.report_date.format(date=day.isoformat())
            for standup in by_day[day]:
                text += self.translation.report_line.format(user=standup.user_id, comment=standup.comment)
            body.append(text)
        return body
