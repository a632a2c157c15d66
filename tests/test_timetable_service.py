"""
Tests for personal standup timetables
"""
import pytest
import pytz

from src.errors import ValidationError
from src.models import ChannelMember, TimeTable
from src.utils.parsing import format_time, parse_time

CHANNEL_ID = "chan1"
TZ = pytz.UTC


def timetable_of(store, user_id):
    member = store.members[(user_id, CHANNEL_ID)]
    return store.select_timetable(member.id)


class TestSetTimetable:

    def test_show_lists_exactly_the_named_days(self, timetable_service):
        timetable_service.set_timetable(["<@u|n>"], "Mon Wed", "09:00", CHANNEL_ID)
        result = timetable_service.show_timetable(["<@u|n>"], CHANNEL_ID)
        assert result == "Timetable for <@u> is: | Monday 09:00 | Wednesday 09:00 |\n"

    def test_first_set_creates_member_and_timetable(self, store, timetable_service):
        result = timetable_service.set_timetable(["<@u|n>"], "fri", "10:30", CHANNEL_ID)
        assert result == "Timetable for <@u> created: | Friday 10:30 |\n"
        member = store.members[("u", CHANNEL_ID)]
        assert member.role_in_channel == ""
        timetable = timetable_of(store, "u")
        assert timetable.friday == parse_time("10:30", TZ)
        assert timetable.monday == timetable.saturday == 0

    def test_successive_sets_merge(self, store, timetable_service):
        timetable_service.set_timetable(["<@u|n>"], "mon tue", "09:00", CHANNEL_ID)
        result = timetable_service.set_timetable(["<@u|n>"], "tue thu", "11:15", CHANNEL_ID)
        assert result == "Timetable for <@u> updated: | Monday 09:00 | Tuesday 11:15 | Thursday 11:15 |\n"

        timetable = timetable_of(store, "u")
        assert format_time(timetable.monday, TZ) == "09:00"
        assert format_time(timetable.tuesday, TZ) == "11:15"
        assert format_time(timetable.thursday, TZ) == "11:15"
        assert timetable.wednesday == timetable.friday == timetable.saturday == timetable.sunday == 0
        assert len(store.timetables) == 1

    def test_existing_member_keeps_role(self, store, timetable_service):
        store.create_channel_member(ChannelMember(user_id="u", channel_id=CHANNEL_ID, role_in_channel="pm"))
        timetable_service.set_timetable(["<@u|n>"], "mon", "09:00", CHANNEL_ID)
        assert store.members[("u", CHANNEL_ID)].role_in_channel == "pm"
        assert len(store.members) == 1

    @pytest.mark.parametrize("weekdays, time_text, code", [
        ("mon", "25:00", "wrong_time_format"),
        ("mon", "nine", "wrong_time_format"),
        ("mon someday", "09:00", "wrong_weekday"),
        ("", "09:00", "no_weekdays"),
    ])
    def test_bad_tokens_fail_before_any_write(self, store, timetable_service, weekdays, time_text, code):
        with pytest.raises(ValidationError) as exc:
            timetable_service.set_timetable(["<@u|n>"], weekdays, time_text, CHANNEL_ID)
        assert exc.value.code == code
        assert store.writes == []

    def test_malformed_mentions_are_reported_in_order(self, store, timetable_service):
        result = timetable_service.set_timetable(["plainword", "<@u|n>"], "sun", "08:00", CHANNEL_ID)
        lines = result.splitlines()
        assert "plainword" in lines[0]
        assert lines[1] == "Timetable for <@u> created: | Sunday 08:00 |"
        assert len(store.members) == 1

    def test_store_failure_is_reported_per_user(self, store, timetable_service):
        store.fail_on.add("update_timetable")
        result = timetable_service.set_timetable(["<@u1|a>", "<@u2|b>"], "mon", "09:00", CHANNEL_ID)
        lines = result.splitlines()
        assert len(lines) == 2
        assert all(line.startswith("Could not update timetable") for line in lines)


class TestShowTimetable:

    def test_each_mention_gets_its_own_line(self, store, timetable_service):
        timetable_service.set_timetable(["<@u1|a>"], "mon tue wed thu fri", "05:00", CHANNEL_ID)
        store.create_channel_member(ChannelMember(user_id="u3", channel_id=CHANNEL_ID))
        timetable_service.set_timetable(["<@u4|d>"], "sat mon", "05:00", CHANNEL_ID)

        result = timetable_service.show_timetable(["<@u1|a>", "<@u2|b>", "<@u3|c>", "<@u4|d>"], CHANNEL_ID)
        assert result == (
            "Timetable for <@u1> is: | Monday 05:00 | Tuesday 05:00 | Wednesday 05:00 | Thursday 05:00 | Friday 05:00 |\n"
            "Seems like <@u2> is not even assigned as standuper in this channel!\n"
            "<@u3> does not have a timetable!\n"
            "Timetable for <@u4> is: | Monday 05:00 | Saturday 05:00 |\n"
        )

    def test_show_does_not_write(self, store, timetable_service):
        timetable_service.show_timetable(["<@u1|a>", "plainword"], CHANNEL_ID)
        assert store.writes == []


class TestRemoveTimetable:

    def test_missing_timetable_is_reported_without_delete(self, store, timetable_service):
        store.create_channel_member(ChannelMember(user_id="u1", channel_id=CHANNEL_ID))
        result = timetable_service.remove_timetable(["<@u1|a>"], CHANNEL_ID)
        assert result == "<@u1> does not have a timetable!\n"
        assert "delete_timetable" not in store.writes

    def test_remove_then_set_again(self, store, timetable_service):
        timetable_service.set_timetable(["<@u1|a>"], "mon", "09:00", CHANNEL_ID)
        result = timetable_service.remove_timetable(["<@u1|a>"], CHANNEL_ID)
        assert result == "Timetable removed for <@u1>\n"
        assert store.timetables == {}
        assert ("u1", CHANNEL_ID) in store.members

        result = timetable_service.set_timetable(["<@u1|a>"], "tue", "09:00", CHANNEL_ID)
        assert result == "Timetable for <@u1> created: | Tuesday 09:00 |\n"

    def test_failures_do_not_block_other_mentions(self, store, timetable_service):
        timetable_service.set_timetable(["<@u1|a>"], "mon", "09:00", CHANNEL_ID)
        result = timetable_service.remove_timetable(["<@ghost|g>", "bad", "<@u1|a>"], CHANNEL_ID)
        lines = result.splitlines()
        assert lines[0] == "Seems like <@ghost> is not even assigned as standuper in this channel!"
        assert "bad" in lines[1]
        assert lines[2] == "Timetable removed for <@u1>"

    def test_delete_failure_is_reported(self, store, timetable_service):
        member = store.create_channel_member(ChannelMember(user_id="u1", channel_id=CHANNEL_ID))
        store.create_timetable(TimeTable(channel_member_id=member.id, monday=1))
        store.fail_on.add("delete_timetable")
        result = timetable_service.remove_timetable(["<@u1|a>"], CHANNEL_ID)
        assert result.startswith("Could not remove timetable for <@u1>")
        assert len(store.timetables) == 1
