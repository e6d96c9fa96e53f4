"""
Calendar tasks (iCalendar VTODO items).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Union
import uuid

from . import config
from .properties import ExtraProperty
from .sync_status import SyncStatus
from .timezone_utils import to_utc_datetime, optional_utc_datetime, utc_now
from .url_utils import item_url


@dataclass(frozen=True)
class Uncompleted:
    """The task still needs action."""


@dataclass(frozen=True)
class Completed:
    """The task is done, possibly at a known time."""
    completion_date: Optional[datetime] = None

    def __post_init__(self):
        if self.completion_date is not None:
            object.__setattr__(self, 'completion_date', to_utc_datetime(self.completion_date))


CompletionStatus = Union[Uncompleted, Completed]


class Task:
    """
    A to-do item.

    Same identity and sync fields as Event, plus a completion status.
    Setters do not update last_modified.
    """

    def __init__(
        self,
        uid: str,
        parent_calendar_url: str,
        name: str,
        completion_status: CompletionStatus,
        sync_status: SyncStatus,
    ):
        now = utc_now()
        self._uid = uid
        self._url = item_url(parent_calendar_url, uid)
        self._calendar_product_id = config.default_prod_id()
        self._sync_status = sync_status
        self._last_modified = now
        self._creation_date: Optional[datetime] = now

        self._name = name
        self._completion_status = completion_status

        self._extra_properties: list[ExtraProperty] = []

    @classmethod
    def new(cls, name: str, completed: bool, parent_calendar_url: str) -> 'Task':
        """
        Create a brand new local task with a generated uid.

        A completed task is marked as completed now.
        """
        status = Completed(utc_now()) if completed else Uncompleted()
        return cls(
            uid=str(uuid.uuid4()),
            parent_calendar_url=parent_calendar_url,
            name=name,
            completion_status=status,
            sync_status=SyncStatus.not_synced(),
        )

    @classmethod
    def from_parts(
        cls,
        uid: str,
        url: str,
        name: str,
        completion_status: CompletionStatus,
        sync_status: SyncStatus,
        last_modified: datetime,
        creation_date: Optional[datetime] = None,
        calendar_product_id: Optional[str] = None,
        extra_properties: Optional[Iterable[ExtraProperty]] = None,
    ) -> 'Task':
        """Rebuild a task from data that already exists elsewhere (e.g. a server)."""
        task = cls.__new__(cls)
        task._uid = uid
        task._url = url
        task._calendar_product_id = config.default_prod_id() if calendar_product_id is None else calendar_product_id
        task._sync_status = sync_status
        task._last_modified = to_utc_datetime(last_modified)
        task._creation_date = optional_utc_datetime(creation_date)
        task._name = name
        task._completion_status = completion_status
        task._extra_properties = list(extra_properties or [])
        return task

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
        self._last_modified = utc_now()

    @property
    def creation_date(self) -> Optional[datetime]:
        return self._creation_date

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def completion_status(self) -> CompletionStatus:
        return self._completion_status

    @completion_status.setter
    def completion_status(self, value: CompletionStatus):
        self._completion_status = value

    @property
    def completed(self) -> bool:
        return isinstance(self._completion_status, Completed)

    def set_completed(self, completed: bool) -> None:
        """Mark as completed now, or as needing action."""
        if completed:
            self._completion_status = Completed(utc_now())
        else:
            self._completion_status = Uncompleted()

    @property
    def extra_properties(self) -> list[ExtraProperty]:
        """All properties that are not parsed as fields of the task."""
        return self._extra_properties

    def _fields(self) -> tuple:
        return (
            self._uid, self._url, self._calendar_product_id, self._sync_status,
            self._last_modified, self._creation_date,
            self._name, self._completion_status,
        )

    def __eq__(self, other):
        if isinstance(other, Task):
            return self._fields() == other._fields()
        return NotImplemented

    def __repr__(self):
        return f"Task(uid={self._uid!r}, name={self._name!r}, completed={self.completed})"
