"""Repositories pre-filled with the application's starting data."""

from __future__ import annotations

from .models import (
    DateModel,
    FrequencyModel,
    FrequencyPresetModel,
    MissionModel,
    PowerModel,
    PowerPresetModel,
    TaskModel,
    TimeModel,
)
from .repositories import (
    MockDateTimeRepository,
    MockFrequencyPresetRepository,
    MockMissionRepository,
    MockPowerPresetRepository,
    MockTaskRepository,
)

_TASK_DUE_DATE = 1717986537151


def date_time_repo() -> MockDateTimeRepository:
    """A date/time source fixed at 2025-01-01 16:43:00."""
    return MockDateTimeRepository(
        DateModel(year=2025, month=1, day=1),
        TimeModel(hour=16, minute=43, second=0),
        1718183634,
    )


def task_repo() -> MockTaskRepository:
    """Three open tasks of low, medium and high priority."""
    return MockTaskRepository(
        [
            TaskModel(title="Power on", done=False, due_date=_TASK_DUE_DATE, priority="low"),
            TaskModel(title="Talk", done=False, due_date=_TASK_DUE_DATE, priority="med"),
            TaskModel(title="Power off", done=False, due_date=_TASK_DUE_DATE, priority="high"),
        ]
    )


def _power(power1: float, power2: float, power3: float) -> PowerModel:
    return PowerModel(
        power1=power1,
        power2=power2,
        power3=power3,
        power4=1.1,
        power5=1.1,
        power6=1.1,
        power7=1.1,
        power8=1.1,
        power9=1,
        power10=1,
    )


def mission_repo() -> MockMissionRepository:
    """Two missions, each with its own power and frequency preset."""
    power_preset1 = PowerPresetModel(
        power_preset_name="power1", power_preset_desc="desc", values=_power(1.1, 1.1, 3.1)
    )
    power_preset2 = PowerPresetModel(
        power_preset_name="power2", power_preset_desc="desc", values=_power(2.2, 2.1, 3.1)
    )
    frequency_preset1 = FrequencyPresetModel(
        frequency_preset_name="frequency1",
        frequency_preset_desc="desc",
        values=FrequencyModel(freq1=1.1, freq2=1.1, freq3=[1.1]),
    )
    frequency_preset2 = FrequencyPresetModel(
        frequency_preset_name="frequency2",
        frequency_preset_desc="desc",
        values=FrequencyModel(freq1=2.2, freq2=1.1, freq3=[2.2]),
    )
    return MockMissionRepository(
        [
            MissionModel(
                mission_name="mission1",
                mission_id=1,
                mission_desc="desc",
                flagged=False,
                power_model=power_preset1,
                frequency_model=frequency_preset1,
            ),
            MissionModel(
                mission_name="mission2",
                mission_id=2,
                mission_desc="desc",
                flagged=False,
                power_model=power_preset2,
                frequency_model=frequency_preset2,
            ),
        ]
    )


def power_preset_repo() -> MockPowerPresetRepository:
    """Two power presets."""
    return MockPowerPresetRepository(
        [
            PowerPresetModel(
                power_preset_name="power1",
                power_preset_desc="desc",
                values=_power(1.1, 1.2, 3.2),
            ),
            PowerPresetModel(
                power_preset_name="power2",
                power_preset_desc="desc",
                values=_power(2.2, 2.2, 3.2),
            ),
        ]
    )


def frequency_preset_repo() -> MockFrequencyPresetRepository:
    """Two frequency presets."""
    return MockFrequencyPresetRepository(
        [
            FrequencyPresetModel(
                frequency_preset_name="frequency1",
                frequency_preset_desc="desc",
                values=FrequencyModel(freq1=1.1, freq2=1.1, freq3=[1.1]),
            ),
            FrequencyPresetModel(
                frequency_preset_name="frequency2",
                frequency_preset_desc="desc",
                values=FrequencyModel(freq1=2.2, freq2=1.1, freq3=[2.2]),
            ),
        ]
    )