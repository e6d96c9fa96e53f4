"""Unit tests for the Event model."""
from datetime import datetime, date, timedelta

import pytest
import pytz

from calitems import config
from calitems.event import Event, RRULE_FIELD_FREQ, RRULE_VALUE_MONTHLY, RRULE_FIELD_BYSETPOS, RRULE_VALUE_BYSETPOS_LAST
from calitems.properties import ExtraProperty
from calitems.sync_status import SyncStatus

from conftest import CALENDAR_URL


def new_event(uid="abc", **kwargs):
    params = dict(
        parent_calendar_url=CALENDAR_URL,
        name="Dentist",
        full_day=False,
        start=datetime(2024, 2, 1, 8, 0, tzinfo=pytz.UTC),
        end=datetime(2024, 2, 1, 9, 0, tzinfo=pytz.UTC),
        sync_status=SyncStatus.not_synced(),
    )
    params.update(kwargs)
    return Event(uid, **params)


class TestEventCreation:
    """Test cases for creating events."""

    def test_url_derived_from_uid(self):
        """Test that the URL is the parent calendar URL plus <uid>.ics."""
        event = new_event("abc")

        assert event.uid == "abc"
        assert event.url == CALENDAR_URL + "abc.ics"

    def test_url_fallback_stays_in_calendar(self):
        """Test that a uid escaping the calendar gets a random URL inside it."""
        event = new_event("../../elsewhere")

        assert event.url.startswith(CALENDAR_URL)
        assert "elsewhere" not in event.url

    def test_timestamps_stamped_now(self):
        """Test that creation date and last modification are set to now."""
        before = datetime.now(pytz.UTC)
        event = new_event()
        after = datetime.now(pytz.UTC)

        assert before <= event.creation_date <= after
        assert before <= event.last_modified <= after
        assert event.last_modified.tzinfo is not None

    def test_defaults(self):
        """Test that optional fields start unset."""
        event = new_event()

        assert event.location is None
        assert event.description is None
        assert event.recurrence_rule is None
        assert event.repeat_string is None
        assert event.extra_properties == []
        assert event.calendar_product_id == config.default_prod_id()

    def test_product_id_follows_config(self):
        """Test that the default product id comes from the configuration."""
        config.set_org_name("ACME")
        config.set_product_name("Planner")

        assert new_event().calendar_product_id == "-//ACME//Planner//EN"

    def test_url_deterministic_for_colon_uid(self):
        """Test that a uid containing colons always derives the same URL."""
        first = new_event("urn:uuid:1234")
        second = new_event("urn:uuid:1234")

        assert first.url == second.url == CALENDAR_URL + "urn%3Auuid%3A1234.ics"

    def test_start_after_end_accepted(self):
        """Test that no validation is applied to the time span."""
        event = new_event(
            start=datetime(2024, 2, 2, tzinfo=pytz.UTC),
            end=datetime(2024, 2, 1, tzinfo=pytz.UTC),
        )
        assert event.start > event.end

    def test_times_stored_as_utc(self):
        """Test that start and end are normalised to UTC."""
        amsterdam = pytz.timezone("Europe/Amsterdam")
        event = new_event(
            start=amsterdam.localize(datetime(2024, 7, 1, 10, 0)),
            end=date(2024, 7, 2),
        )

        assert event.start == datetime(2024, 7, 1, 8, 0, tzinfo=pytz.UTC)
        assert event.start.utcoffset() == timedelta(0)
        assert event.end == datetime(2024, 7, 2, 0, 0, tzinfo=pytz.UTC)

    def test_naive_datetime_is_utc(self):
        """Test that naive datetimes are read as UTC."""
        event = new_event(start=datetime(2024, 2, 1, 8, 0))
        assert event.start == datetime(2024, 2, 1, 8, 0, tzinfo=pytz.UTC)

    def test_invalid_parent_url(self):
        """Test that a relative parent URL is rejected."""
        with pytest.raises(ValueError):
            new_event(parent_calendar_url="calendars/home/")


class TestEventSetters:
    """Test cases for mutating events."""

    def test_setters_do_not_touch_last_modified(self):
        """Test that setters leave last_modified alone."""
        event = new_event()
        last_modified = event.last_modified

        event.name = "Orthodontist"
        event.location = "Main street 1"
        event.description = "Bring the card"
        event.recurrence_rule = [(RRULE_FIELD_FREQ, RRULE_VALUE_MONTHLY)]
        event.sync_status = SyncStatus.locally_modified("etag-1")

        assert event.last_modified == last_modified
        assert event.name == "Orthodontist"
        assert event.location == "Main street 1"
        assert event.description == "Bring the card"
        assert event.sync_status == SyncStatus.locally_modified("etag-1")

    def test_update_last_modified(self):
        """Test that last_modified can be bumped explicitly."""
        event = Event.from_parts(
            uid="abc", url=CALENDAR_URL + "abc.ics", name="x", full_day=False,
            start=datetime(2024, 1, 1, tzinfo=pytz.UTC), end=datetime(2024, 1, 1, tzinfo=pytz.UTC),
            sync_status=SyncStatus.not_synced(),
            last_modified=datetime(2000, 1, 1, tzinfo=pytz.UTC),
        )
        event.update_last_modified()

        assert event.last_modified.year >= 2024

    def test_identity_is_read_only(self):
        """Test that uid and url cannot be reassigned."""
        event = new_event()

        with pytest.raises(AttributeError):
            event.uid = "other"
        with pytest.raises(AttributeError):
            event.url = "http://elsewhere/"

    def test_clear_optional_field(self):
        """Test that optional fields can be unset again."""
        event = new_event()
        event.location = "Somewhere"
        event.location = None

        assert event.location is None


class TestRepeatString:
    """Test cases for the RRULE value rendering."""

    def test_insertion_order(self):
        """Test that pairs are joined in the order they were given."""
        event = new_event()
        event.recurrence_rule = [("FREQ", "WEEKLY"), ("BYDAY", "MO")]

        assert event.repeat_string == "FREQ=WEEKLY;BYDAY=MO"

    def test_no_reordering_or_deduplication(self):
        """Test that repeated and oddly ordered keys are kept."""
        event = new_event()
        event.recurrence_rule = [
            (RRULE_FIELD_BYSETPOS, RRULE_VALUE_BYSETPOS_LAST),
            ("BYDAY", "FR"),
            ("BYDAY", "FR"),
            (RRULE_FIELD_FREQ, RRULE_VALUE_MONTHLY),
        ]

        assert event.repeat_string == "BYSETPOS=-1;BYDAY=FR;BYDAY=FR;FREQ=MONTHLY"

    def test_single_pair_has_no_separator(self):
        """Test that there is no trailing separator."""
        event = new_event()
        event.recurrence_rule = [("FREQ", "DAILY")]

        assert event.repeat_string == "FREQ=DAILY"

    def test_rule_is_copied(self):
        """Test that later changes to the caller's list do not leak in."""
        rule = [("FREQ", "DAILY")]
        event = new_event()
        event.recurrence_rule = rule
        rule.append(("COUNT", "3"))

        assert event.repeat_string == "FREQ=DAILY"


class TestEventEquality:
    """Test cases for event comparison."""

    def make(self, **kwargs):
        params = dict(
            uid="abc", url=CALENDAR_URL + "abc.ics", name="Dentist", full_day=False,
            start=datetime(2024, 2, 1, 8, 0, tzinfo=pytz.UTC),
            end=datetime(2024, 2, 1, 9, 0, tzinfo=pytz.UTC),
            sync_status=SyncStatus.synced("etag-1"),
            last_modified=datetime(2024, 1, 1, tzinfo=pytz.UTC),
            recurrence_rule=[("FREQ", "WEEKLY"), ("BYDAY", "MO")],
        )
        params.update(kwargs)
        return Event.from_parts(**params)

    def test_equal_events(self):
        """Test that events with the same fields are equal."""
        assert self.make() == self.make()

    def test_extra_properties_ignored(self):
        """Test that pass-through properties do not take part in equality."""
        assert self.make() == self.make(extra_properties=[ExtraProperty("X-A", "1")])

    def test_recurrence_order_matters(self):
        """Test that the recurrence sequence is compared in order."""
        assert self.make() != self.make(recurrence_rule=[("BYDAY", "MO"), ("FREQ", "WEEKLY")])

    def test_sync_status_matters(self):
        """Test that the sync status takes part in equality."""
        assert self.make() != self.make(sync_status=SyncStatus.locally_modified("etag-1"))

    def test_empty_product_id_kept(self):
        """Test that an empty PRODID from the server survives reconstruction."""
        assert self.make(calendar_product_id="").calendar_product_id == ""
