"""Shared fixtures for CalItems tests."""
from datetime import datetime

import pytest
import pytz

from calitems import config
from calitems.event import Event
from calitems.sync_status import SyncStatus
from calitems.task import Task, Uncompleted


CALENDAR_URL = "http://my.calend.ar/calendars/home/"
PROD_ID = "-//My organization//CalItems//EN"


@pytest.fixture(autouse=True)
def default_config():
    """Restore the process-wide configuration after each test."""
    yield
    config.set_org_name(config.DEFAULT_ORG_NAME)
    config.set_product_name(config.DEFAULT_PRODUCT_NAME)
    config.set_debug(False)


@pytest.fixture
def now():
    """A fixed instant used as creation and modification time."""
    return datetime(2024, 1, 1, 9, 30, 0, tzinfo=pytz.UTC)


@pytest.fixture
def timed_event(now):
    """A one and a half hour event with every optional field unset."""
    return Event.from_parts(
        uid="event-1",
        url=CALENDAR_URL + "event-1.ics",
        name="Team meeting",
        full_day=False,
        start=datetime(2024, 1, 5, 14, 0, tzinfo=pytz.UTC),
        end=datetime(2024, 1, 5, 15, 30, tzinfo=pytz.UTC),
        sync_status=SyncStatus.not_synced(),
        last_modified=now,
        creation_date=now,
    )


@pytest.fixture
def uncompleted_task(now):
    """A task that still needs action."""
    return Task.from_parts(
        uid="task-1",
        url=CALENDAR_URL + "task-1.ics",
        name="Buy milk",
        completion_status=Uncompleted(),
        sync_status=SyncStatus.not_synced(),
        last_modified=now,
        creation_date=now,
    )
