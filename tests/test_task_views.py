import pytest

from missiondesk.models import DateModel, TaskModel, TimeModel
from missiondesk.task_views import (
    Date,
    Time,
    map_date_model_to_date,
    map_date_to_date_model,
    map_task_to_item,
    map_time_model_to_time,
    map_time_to_time_model,
)


def test_task_fields_carried_to_item():
    task = TaskModel(title="Power on", priority="high", due_date=1717986537151, done=True)
    item = map_task_to_item(task)
    assert item.text == "Power on"
    assert item.checked is True
    assert item.priority == "high"


def test_due_date_formatting():
    item = map_task_to_item(TaskModel(title="Talk", due_date=1717986537151))
    assert item.description == "Mon, Jun 10, 2024 02:28"


def test_epoch_formatting():
    assert map_task_to_item(TaskModel(due_date=0)).description == "Thu, Jan 01, 1970 00:00"


def test_seconds_do_not_show_in_description():
    first = map_task_to_item(TaskModel(due_date=1717986537151))
    later = map_task_to_item(TaskModel(due_date=1717986537151 + 2000))
    assert first.description == later.description


def test_out_of_range_due_date_raises():
    with pytest.raises(ValueError):
        map_task_to_item(TaskModel(due_date=10**20))


def test_time_round_trip():
    model = TimeModel(hour=13, minute=30, second=29)
    time = map_time_model_to_time(model)
    assert time == Time(hour=13, minute=30, second=29)
    assert map_time_to_time_model(time) == model


def test_date_round_trip():
    model = DateModel(year=2024, month=6, day=12)
    date = map_date_model_to_date(model)
    assert date == Date(year=2024, month=6, day=12)
    assert map_date_to_date_model(date) == model