"""
Build iCalendar text from calendar items.

Every item becomes a complete VCALENDAR document holding one VEVENT or
VTODO. Property order is fixed so that the output is stable and diffable.
Lines end with CRLF. They are neither folded nor escaped.
"""

from datetime import datetime
from io import StringIO
from typing import Callable, Iterable, Optional
import sys

from icalendar.prop import vDate, vDatetime

from . import config
from .event import Event
from .item import Item, component_name
from .properties import ExtraProperty
from .task import Task, Completed
from .timezone_utils import to_utc_datetime


CRLF = "\r\n"
ICAL_VERSION = "2.0"


class BuildError(Exception):
    """An item could not be turned into iCalendar text."""


def _debug_print(msg: str) -> None:
    if not config.is_debug():
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] BUILDER: {msg}", file=sys.stderr)


def format_date_time(dt: datetime) -> str:
    """Format an instant as a UTC DATE-TIME value, e.g. ``20240101T093000Z``."""
    return vDatetime(to_utc_datetime(dt)).to_ical().decode('utf-8')


def format_date(dt: datetime) -> str:
    """Format the UTC calendar day of an instant as a DATE value, e.g. ``20240101``."""
    return vDate(to_utc_datetime(dt).date()).to_ical().decode('utf-8')


class ContentWriter:
    """Accumulates iCalendar content lines in memory."""

    def __init__(self):
        self._buffer = StringIO()

    def line(self, name: str, value: Optional[str], params: Iterable[tuple[str, str]] = ()) -> None:
        """Write ``NAME;PARAM=VALUE...:value``. A missing value is written empty."""
        self._buffer.write(name)
        for key, param_value in params:
            self._buffer.write(f";{key}={param_value}")
        self._buffer.write(":")
        self._buffer.write("" if value is None else value)
        self._buffer.write(CRLF)

    def begin(self, component: str) -> None:
        self.line("BEGIN", component)

    def end(self, component: str) -> None:
        self.line("END", component)

    def getvalue(self) -> str:
        return self._buffer.getvalue()


def _render(item: Item, write_properties: Callable[[ContentWriter], None]) -> str:
    """Wrap the properties written by ``write_properties`` in a VCALENDAR."""
    component = component_name(item)
    writer = ContentWriter()
    try:
        writer.begin("VCALENDAR")
        writer.line("VERSION", ICAL_VERSION)
        writer.line("PRODID", item.calendar_product_id)
        writer.begin(component)
        write_properties(writer)
        writer.end(component)
        writer.end("VCALENDAR")
    except (ValueError, TypeError, AttributeError, UnicodeError) as e:
        _debug_print(f"Failed to build {component} {item.uid!r}: {e}")
        raise BuildError(f"Cannot build {component} for item {item.uid!r}: {e}") from e
    return writer.getvalue()


def build_from(item: Item) -> str:
    """
    Create an iCalendar document from an item.

    Args:
        item: An Event or a Task

    Returns:
        The VCALENDAR text

    Raises:
        BuildError: if a field cannot be formatted
        TypeError: if item is neither an Event nor a Task
    """
    if isinstance(item, Event):
        return build_from_event(item)
    if isinstance(item, Task):
        return build_from_task(item)
    raise TypeError(f"Not a calendar item: {type(item).__name__}")


def build_from_event(event: Event) -> str:
    """Create a VCALENDAR holding one VEVENT."""

    def write_properties(writer: ContentWriter) -> None:
        s_last_modified = format_date_time(event.last_modified)

        writer.line("UID", event.uid)
        writer.line("DTSTAMP", s_last_modified)
        if event.creation_date is not None:
            writer.line("CREATED", format_date_time(event.creation_date))

        if event.full_day:
            writer.line("DTSTART", format_date(event.start), [("VALUE", "DATE")])
            writer.line("DTEND", format_date(event.end), [("VALUE", "DATE")])
        else:
            writer.line("DTSTART", format_date_time(event.start))
            writer.line("DTEND", format_date_time(event.end))

        writer.line("SUMMARY", event.name)
        writer.line("LAST-MODIFIED", s_last_modified)

        if event.location is not None:
            writer.line("LOCATION", event.location)
        if event.description is not None:
            writer.line("DESCRIPTION", event.description)
        repeat = event.repeat_string
        if repeat is not None:
            writer.line("RRULE", repeat)

    return _render(event, write_properties)


def build_from_task(task: Task) -> str:
    """Create a VCALENDAR holding one VTODO."""

    def write_properties(writer: ContentWriter) -> None:
        s_last_modified = format_date_time(task.last_modified)

        writer.line("UID", task.uid)
        writer.line("DTSTAMP", s_last_modified)
        if task.creation_date is not None:
            writer.line("CREATED", format_date_time(task.creation_date))
        writer.line("LAST-MODIFIED", s_last_modified)
        writer.line("SUMMARY", task.name)

        status = task.completion_status
        if isinstance(status, Completed):
            writer.line("PERCENT-COMPLETE", "100")
            if status.completion_date is not None:
                writer.line("COMPLETED", format_date_time(status.completion_date))
            writer.line("STATUS", "COMPLETED")
        else:
            writer.line("STATUS", "NEEDS-ACTION")

        # Also add the fields we do not handle
        for prop in task.extra_properties:
            write_extra_property(writer, prop)

    return _render(task, write_properties)


def write_extra_property(writer: ContentWriter, prop: ExtraProperty) -> None:
    """
    Write a pass-through property.

    Multiple values of one parameter are joined with ';'. This is lossy when
    a value itself contains ';'.
    """
    params = [(key, ";".join(values)) for key, values in prop.params.items()]
    writer.line(prop.name, prop.value, params)
