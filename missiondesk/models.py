"""Plain data records for tasks, missions and their presets."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DateModel:
    """A calendar date."""

    year: int = 0
    month: int = 0
    day: int = 0


@dataclass(frozen=True)
class TimeModel:
    """A time of day."""

    hour: int = 0
    minute: int = 0
    second: int = 0


@dataclass
class TaskModel:
    """A to-do item; ``due_date`` is in milliseconds since the epoch."""

    title: str = ""
    priority: str = ""
    due_date: int = 0
    done: bool = False


@dataclass
class PowerModel:
    """The ten power settings of a power preset."""

    power1: float = 0.0
    power2: float = 0.0
    power3: float = 0.0
    power4: float = 0.0
    power5: float = 0.0
    power6: float = 0.0
    power7: float = 0.0
    power8: float = 0.0
    power9: int = 0
    power10: int = 0


@dataclass
class PowerPresetModel:
    """A named set of power settings."""

    power_preset_name: str = ""
    power_preset_desc: str = ""
    values: PowerModel = field(default_factory=PowerModel)


@dataclass
class FrequencyModel:
    """The frequency settings of a frequency preset."""

    freq1: float = 0.0
    freq2: float = 0.0
    freq3: list[float] = field(default_factory=list)


@dataclass
class FrequencyPresetModel:
    """A named set of frequency settings."""

    frequency_preset_name: str = ""
    frequency_preset_desc: str = ""
    values: FrequencyModel = field(default_factory=FrequencyModel)


@dataclass
class MissionModel:
    """A mission combining one frequency preset and one power preset."""

    mission_name: str = ""
    mission_desc: str = ""
    mission_id: int = 0
    frequency_model: FrequencyPresetModel = field(default_factory=FrequencyPresetModel)
    power_model: PowerPresetModel = field(default_factory=PowerPresetModel)
    flagged: bool = False