"""Repository interfaces and in-memory implementations."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

from .models import (
    DateModel,
    FrequencyPresetModel,
    MissionModel,
    PowerPresetModel,
    TaskModel,
    TimeModel,
)

T = TypeVar("T")


class DateTimeRepository(ABC):
    """Source of the current date and time and their text forms."""

    @abstractmethod
    def current_date(self) -> DateModel: ...

    @abstractmethod
    def current_time(self) -> TimeModel: ...

    @abstractmethod
    def date_to_string(self, date: DateModel) -> str: ...

    @abstractmethod
    def time_to_string(self, time: TimeModel) -> str: ...

    @abstractmethod
    def time_stamp(self, date: DateModel, time: TimeModel) -> int: ...


class TaskRepository(ABC):
    """Indexed storage of tasks."""

    @abstractmethod
    def task_count(self) -> int: ...

    @abstractmethod
    def get_task(self, index: int) -> Optional[TaskModel]: ...

    @abstractmethod
    def toggle_done(self, index: int) -> bool: ...

    @abstractmethod
    def remove_task(self, index: int) -> bool: ...

    @abstractmethod
    def push_task(self, task: TaskModel) -> bool: ...


class MissionRepository(ABC):
    """Indexed storage of missions."""

    @abstractmethod
    def mission_count(self) -> int: ...

    @abstractmethod
    def get_mission(self, index: int) -> Optional[MissionModel]: ...

    @abstractmethod
    def remove_mission(self, index: int) -> bool: ...

    @abstractmethod
    def push_mission(self, mission: MissionModel) -> bool: ...

    @abstractmethod
    def update_mission(self, index: int, mission: MissionModel) -> bool: ...


class PowerPresetRepository(ABC):
    """Indexed storage of power presets."""

    @abstractmethod
    def power_preset_count(self) -> int: ...

    @abstractmethod
    def get_power_preset(self, index: int) -> Optional[PowerPresetModel]: ...

    @abstractmethod
    def remove_power_preset(self, index: int) -> bool: ...

    @abstractmethod
    def push_power_preset(self, power_preset: PowerPresetModel) -> bool: ...

    @abstractmethod
    def update_power_preset(self, index: int, power_preset: PowerPresetModel) -> bool: ...


class FrequencyPresetRepository(ABC):
    """Indexed storage of frequency presets."""

    @abstractmethod
    def frequency_preset_count(self) -> int: ...

    @abstractmethod
    def get_frequency_preset(self, index: int) -> Optional[FrequencyPresetModel]: ...

    @abstractmethod
    def remove_frequency_preset(self, index: int) -> bool: ...

    @abstractmethod
    def push_frequency_preset(self, frequency_preset: FrequencyPresetModel) -> bool: ...

    @abstractmethod
    def update_frequency_preset(
        self, index: int, frequency_preset: FrequencyPresetModel
    ) -> bool: ...


class MockDateTimeRepository(DateTimeRepository):
    """Returns fixed values given at construction."""

    def __init__(self, current_date: DateModel, current_time: TimeModel, time_stamp: int) -> None:
        self._current_date = current_date
        self._current_time = current_time
        self._time_stamp = time_stamp

    def current_date(self) -> DateModel:
        return self._current_date

    def current_time(self) -> TimeModel:
        return self._current_time

    def date_to_string(self, date: DateModel) -> str:
        return f"{date.year}/{date.month}/{date.day}"

    def time_to_string(self, time: TimeModel) -> str:
        return f"{time.hour}:{time.minute}"

    def time_stamp(self, date: DateModel, time: TimeModel) -> int:
        return self._time_stamp


class _ListStore(Generic[T]):
    """A list whose items are handed out and taken in as independent copies."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items: list[T] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def get(self, index: int) -> Optional[T]:
        return copy.deepcopy(self._items[index]) if self._valid(index) else None

    def remove(self, index: int) -> bool:
        if not self._valid(index):
            return False
        del self._items[index]
        return True

    def push(self, item: T) -> bool:
        self._items.append(item)
        return True

    def replace(self, index: int, item: T) -> bool:
        if not self._valid(index):
            return False
        self._items[index] = item
        return True

    def item(self, index: int) -> Optional[T]:
        return self._items[index] if self._valid(index) else None


class MockTaskRepository(TaskRepository):
    """Keeps tasks in memory."""

    def __init__(self, tasks: Iterable[TaskModel] = ()) -> None:
        self._tasks = _ListStore(tasks)

    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Optional[TaskModel]:
        return self._tasks.get(index)

    def toggle_done(self, index: int) -> bool:
        task = self._tasks.item(index)
        if task is None:
            return False
        task.done = not task.done
        return True

    def remove_task(self, index: int) -> bool:
        return self._tasks.remove(index)

    def push_task(self, task: TaskModel) -> bool:
        return self._tasks.push(task)


class MockMissionRepository(MissionRepository):
    """Keeps missions in memory."""

    def __init__(self, missions: Iterable[MissionModel] = ()) -> None:
        self._missions = _ListStore(missions)

    def mission_count(self) -> int:
        return len(self._missions)

    def get_mission(self, index: int) -> Optional[MissionModel]:
        return self._missions.get(index)

    def remove_mission(self, index: int) -> bool:
        return self._missions.remove(index)

    def push_mission(self, mission: MissionModel) -> bool:
        return self._missions.push(mission)

    def update_mission(self, index: int, mission: MissionModel) -> bool:
        return self._missions.replace(index, mission)


class MockPowerPresetRepository(PowerPresetRepository):
    """Keeps power presets in memory."""

    def __init__(self, power_presets: Iterable[PowerPresetModel] = ()) -> None:
        self._presets = _ListStore(power_presets)

    def power_preset_count(self) -> int:
        return len(self._presets)

    def get_power_preset(self, index: int) -> Optional[PowerPresetModel]:
        return self._presets.get(index)

    def remove_power_preset(self, index: int) -> bool:
        return self._presets.remove(index)

    def push_power_preset(self, power_preset: PowerPresetModel) -> bool:
        return self._presets.push(power_preset)

    def update_power_preset(self, index: int, power_preset: PowerPresetModel) -> bool:
        return self._presets.replace(index, power_preset)


class MockFrequencyPresetRepository(FrequencyPresetRepository):
    """Keeps frequency presets in memory."""

    def __init__(self, frequency_presets: Iterable[FrequencyPresetModel] = ()) -> None:
        self._presets = _ListStore(frequency_presets)

    def frequency_preset_count(self) -> int:
        return len(self._presets)

    def get_frequency_preset(self, index: int) -> Optional[FrequencyPresetModel]:
        return self._presets.get(index)

    def remove_frequency_preset(self, index: int) -> bool:
        return self._presets.remove(index)

    def push_frequency_preset(self, frequency_preset: FrequencyPresetModel) -> bool:
        return self._presets.push(frequency_preset)

    def update_frequency_preset(
        self, index: int, frequency_preset: FrequencyPresetModel
    ) -> bool:
        return self._presets.replace(index, frequency_preset)