"""
CalItems

Calendar items and their iCalendar serialization:
- Configuration and product identity (config.py)
- Sync status of items (sync_status.py)
- Pass-through properties (properties.py)
- Events (event.py) and tasks (task.py), the two kinds of Item (item.py)
- iCalendar builder (ical_builder.py)
- Recurrence expansion with recurring_ical_events (recurrence.py)
"""

from .config import Config, default_prod_id
from .sync_status import SyncState, SyncStatus
from .properties import ExtraProperty
from .event import Event
from .task import Task, CompletionStatus, Completed, Uncompleted
from .item import Item
from .ical_builder import BuildError, build_from, build_from_event, build_from_task
from .recurrence import Occurrence, expand_occurrences

__all__ = [
    'Config',
    'default_prod_id',
    'SyncState',
    'SyncStatus',
    'ExtraProperty',
    'Event',
    'Task',
    'CompletionStatus',
    'Completed',
    'Uncompleted',
    'Item',
    'BuildError',
    'build_from',
    'build_from_event',
    'build_from_task',
    'Occurrence',
    'expand_occurrences',
]
