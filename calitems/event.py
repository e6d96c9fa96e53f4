"""
Calendar events (iCalendar VEVENT items).

Start and end are always stored as UTC instants. Whether they are rendered
as dates or date-times is decided by the full_day flag at serialization.
"""

from datetime import datetime, date
from typing import Iterable, Optional, Union

from . import config
from .properties import ExtraProperty
from .sync_status import SyncStatus
from .timezone_utils import to_utc_datetime, optional_utc_datetime, utc_now
from .url_utils import item_url


RRULE_FIELD_FREQ = "FREQ"
RRULE_VALUE_YEARLY = "YEARLY"
RRULE_VALUE_MONTHLY = "MONTHLY"
RRULE_VALUE_WEEKLY = "WEEKLY"
RRULE_VALUE_DAILY = "DAILY"
RRULE_VALUE_HOURLY = "HOURLY"

RRULE_FIELD_BYMONTH = "BYMONTH"

RRULE_FIELD_BYMONTHDAY = "BYMONTHDAY"

RRULE_FIELD_BYDAY = "BYDAY"
RRULE_VALUE_BYDAY_MONDAY = "MO"
RRULE_VALUE_BYDAY_TUESDAY = "TU"
RRULE_VALUE_BYDAY_WEDNESDAY = "WE"
RRULE_VALUE_BYDAY_THURSDAY = "TH"
RRULE_VALUE_BYDAY_FRIDAY = "FR"
RRULE_VALUE_BYDAY_SATURDAY = "SA"
RRULE_VALUE_BYDAY_SUNDAY = "SU"

RRULE_FIELD_BYSETPOS = "BYSETPOS"
RRULE_VALUE_BYSETPOS_FIRST = "1"
RRULE_VALUE_BYSETPOS_SECOND = "2"
RRULE_VALUE_BYSETPOS_THIRD = "3"
RRULE_VALUE_BYSETPOS_FOURTH = "4"
RRULE_VALUE_BYSETPOS_LAST = "-1"

RRULE_FIELD_INTERVAL = "INTERVAL"

RRULE_FIELD_COUNT = "COUNT"
RRULE_FIELD_UNTIL = "UNTIL"


RecurrenceRule = list[tuple[str, str]]


def _copy_rule(rule: Optional[Iterable[tuple[str, str]]]) -> Optional[RecurrenceRule]:
    if rule is None:
        return None
    return [(str(key), str(value)) for key, value in rule]


class Event:
    """
    A calendar event.

    uid and url are fixed at construction. Every other field has a setter.
    Setters do not update last_modified; call update_last_modified() for that.
    """

    def __init__(
        self,
        uid: str,
        parent_calendar_url: str,
        name: str,
        full_day: bool,
        start: Union[datetime, date],
        end: Union[datetime, date],
        sync_status: SyncStatus,
    ):
        """
        Create a new event.

        Args:
            uid: Globally unique identifier (generated, or inherited from a server)
            parent_calendar_url: URL of the calendar this event belongs to
            name: Event title (SUMMARY)
            full_day: True if start and end are to be read as dates
            start: Start of the event
            end: End of the event
            sync_status: Initial sync status
        """
        now = utc_now()
        self._uid = uid
        self._url = item_url(parent_calendar_url, uid)
        self._calendar_product_id = config.default_prod_id()
        self._sync_status = sync_status
        self._last_modified = now
        self._creation_date: Optional[datetime] = now

        self._name = name
        self._full_day = full_day
        self._start = to_utc_datetime(start)
        self._end = to_utc_datetime(end)
        self._location: Optional[str] = None
        self._recurrence_rule: Optional[RecurrenceRule] = None
        self._description: Optional[str] = None

        self._extra_properties: list[ExtraProperty] = []

    @classmethod
    def from_parts(
        cls,
        uid: str,
        url: str,
        name: str,
        full_day: bool,
        start: Union[datetime, date],
        end: Union[datetime, date],
        sync_status: SyncStatus,
        last_modified: datetime,
        creation_date: Optional[datetime] = None,
        calendar_product_id: Optional[str] = None,
        location: Optional[str] = None,
        recurrence_rule: Optional[Iterable[tuple[str, str]]] = None,
        description: Optional[str] = None,
        extra_properties: Optional[Iterable[ExtraProperty]] = None,
    ) -> 'Event':
        """
        Rebuild an event from data that already exists elsewhere.

        Used for items coming from a server, which keep their own uid, URL,
        timestamps and product id.
        """
        event = cls.__new__(cls)
        event._uid = uid
        event._url = url
        event._calendar_product_id = config.default_prod_id() if calendar_product_id is None else calendar_product_id
        event._sync_status = sync_status
        event._last_modified = to_utc_datetime(last_modified)
        event._creation_date = optional_utc_datetime(creation_date)

        event._name = name
        event._full_day = full_day
        event._start = to_utc_datetime(start)
        event._end = to_utc_datetime(end)
        event._location = location
        event._recurrence_rule = _copy_rule(recurrence_rule)
        event._description = description

        event._extra_properties = list(extra_properties or [])
        return event

    # ==================== Identity ====================

    @property
    def uid(self) -> str:
        return self._uid

    @property
    def url(self) -> str:
        return self._url

    @property
    def calendar_product_id(self) -> str:
        return self._calendar_product_id

    @calendar_product_id.setter
    def calendar_product_id(self, value: str):
        self._calendar_product_id = value

    # ==================== Sync metadata ====================

    @property
    def sync_status(self) -> SyncStatus:
        return self._sync_status

    @sync_status.setter
    def sync_status(self, value: SyncStatus):
        self._sync_status = value

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    def update_last_modified(self) -> None:
        """Stamp last_modified with the current time."""
        self._last_modified = utc_now()

    @property
    def creation_date(self) -> Optional[datetime]:
        return self._creation_date

    # ==================== Event fields ====================

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def full_day(self) -> bool:
        """
        Whether the event is defined for full days or not.
        start and end must be read as dates instead of date-times if True.
        """
        return self._full_day

    @full_day.setter
    def full_day(self, value: bool):
        self._full_day = value

    @property
    def start(self) -> datetime:
        return self._start

    @start.setter
    def start(self, value: Union[datetime, date]):
        self._start = to_utc_datetime(value)

    @property
    def end(self) -> datetime:
        return self._end

    @end.setter
    def end(self, value: Union[datetime, date]):
        self._end = to_utc_datetime(value)

    @property
    def location(self) -> Optional[str]:
        return self._location

    @location.setter
    def location(self, value: Optional[str]):
        self._location = value

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]):
        self._description = value

    @property
    def recurrence_rule(self) -> Optional[RecurrenceRule]:
        """
        The RRULE components as (field, value) pairs, in insertion order.
        See https://www.kanzaki.com/docs/ical/rrule.html
        """
        return self._recurrence_rule

    @recurrence_rule.setter
    def recurrence_rule(self, value: Optional[Iterable[tuple[str, str]]]):
        self._recurrence_rule = _copy_rule(value)

    @property
    def repeat_string(self) -> Optional[str]:
        """The recurrence rule as an RRULE value, e.g. ``FREQ=WEEKLY;BYDAY=MO``."""
        if self._recurrence_rule is None:
            return None
        return ";".join(f"{key}={value}" for key, value in self._recurrence_rule)

    @property
    def extra_properties(self) -> list[ExtraProperty]:
        """All properties that are not parsed as fields of the event."""
        return self._extra_properties

    # ==================== Comparison ====================

    def _fields(self) -> tuple:
        return (
            self._uid, self._url, self._calendar_product_id, self._sync_status,
            self._last_modified, self._creation_date,
            self._name, self._full_day, self._start, self._end,
            self._location, self._recurrence_rule, self._description,
        )

    def __eq__(self, other):
        if isinstance(other, Event):
            return self._fields() == other._fields()
        return NotImplemented

    def __repr__(self):
        return f"Event(uid={self._uid!r}, name={self._name!r}, start={self._start}, full_day={self._full_day})"
