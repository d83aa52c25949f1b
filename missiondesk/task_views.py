"""View records of the task pages and their mapping from the data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .models import DateModel, TaskModel, TimeModel

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class Date:
    """A date as the view shows it."""

    year: int = 0
    month: int = 0
    day: int = 0


@dataclass(frozen=True)
class Time:
    """A time of day as the view shows it."""

    hour: int = 0
    minute: int = 0
    second: int = 0


@dataclass
class SelectionListViewItem:
    """One row of the task list view."""

    text: str = ""
    checked: bool = False
    priority: str = ""
    description: str = ""


def _format_due_date(millis: int) -> str:
    try:
        moment = _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise ValueError(f"due date out of range: {millis}") from exc
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} "
        f"{moment.day:02d}, {moment.year} {moment.hour:02d}:{moment.minute:02d}"
    )


def map_task_to_item(task: TaskModel) -> SelectionListViewItem:
    """Build a list row from a task; the due date is shown in UTC."""
    return SelectionListViewItem(
        text=task.title,
        checked=task.done,
        priority=task.priority,
        description=_format_due_date(task.due_date),
    )


def map_time_model_to_time(time_model: TimeModel) -> Time:
    return Time(hour=time_model.hour, minute=time_model.minute, second=time_model.second)


def map_time_to_time_model(time: Time) -> TimeModel:
    return TimeModel(hour=time.hour, minute=time.minute, second=time.second)


def map_date_model_to_date(date_model: DateModel) -> Date:
    return Date(year=date_model.year, month=date_model.month, day=date_model.day)


def map_date_to_date_model(date: Date) -> DateModel:
    return DateModel(year=date.year, month=date.month, day=date.day)