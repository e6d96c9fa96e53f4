"""
Recurrence expansion for events.

Expands an event's RRULE into concrete occurrences using the
recurring_ical_events library on the event's own iCalendar text.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Union

from icalendar import Calendar as ICalCalendar
from recurring_ical_events import of as recurring_events_of

from .event import Event
from .ical_builder import build_from_event
from .timezone_utils import to_utc_datetime


@dataclass(frozen=True)
class Occurrence:
    """One occurrence of an event, in UTC."""
    start: datetime
    end: datetime


def _window_bound(value: Union[datetime, date], full_day: bool) -> Union[datetime, date]:
    # Full-day events are compared by calendar day
    value = to_utc_datetime(value)
    return value.date() if full_day else value


def expand_occurrences(
    event: Event,
    window_start: Union[datetime, date],
    window_end: Union[datetime, date],
) -> list[Occurrence]:
    """
    List the occurrences of an event that overlap a time window.

    Args:
        event: The event to expand
        window_start: Start of the window (inclusive)
        window_end: End of the window (exclusive)

    Returns:
        Occurrences sorted by start time. A non-recurring event yields
        itself if it overlaps the window.
    """
    calendar = ICalCalendar.from_ical(build_from_event(event))
    components = recurring_events_of(calendar).between(
        _window_bound(window_start, event.full_day),
        _window_bound(window_end, event.full_day),
    )

    occurrences = [
        Occurrence(
            start=to_utc_datetime(component['DTSTART'].dt),
            end=to_utc_datetime(component['DTEND'].dt),
        )
        for component in components
    ]
    occurrences.sort(key=lambda occurrence: occurrence.start)
    return occurrences
