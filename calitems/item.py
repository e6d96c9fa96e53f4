"""
Calendar items: either an Event or a Task.
"""

from typing import Union

from .event import Event
from .task import Task


Item = Union[Event, Task]


def component_name(item: Item) -> str:
    """
    Name of the iCalendar component an item is written as.

    Raises:
        TypeError: if item is neither an Event nor a Task
    """
    if isinstance(item, Event):
        return "VEVENT"
    if isinstance(item, Task):
        return "VTODO"
    raise TypeError(f"Not a calendar item: {type(item).__name__}")