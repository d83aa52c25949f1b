"""View records of the preset and mission pages and their mapping from the data models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from .models import (
    FrequencyModel,
    FrequencyPresetModel,
    MissionModel,
    PowerModel,
    PowerPresetModel,
)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 2**32 - 1


@dataclass
class PowerPresetView:
    """A power preset as the view shows it."""

    preset_name: str = ""
    preset_desc: str = ""
    preset_details: str = ""
    checked: bool = False
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
class FrequencyPresetView:
    """A frequency preset as the view shows it; ``freq3`` is comma separated."""

    preset_name: str = ""
    preset_desc: str = ""
    preset_details: str = ""
    freq1: float = 0.0
    freq2: float = 0.0
    freq3: str = ""
    checked: bool = False


@dataclass
class MissionView:
    """A mission as the view shows it."""

    mission_name: str = ""
    mission_desc: str = ""
    mission_id: int = 0
    mission_details: str = ""
    power_model: PowerPresetView = field(default_factory=PowerPresetView)
    frequency_model: FrequencyPresetView = field(default_factory=FrequencyPresetView)
    checked: bool = False


def _special(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return None


def _display(value: float) -> str:
    """Plain decimal form: no exponent, no trailing ``.0``."""
    special = _special(value)
    if special is not None:
        return special
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-"):
        text = "0"
    return "-0" if text == "0" and math.copysign(1.0, value) < 0 else text


def _debug(value: float) -> str:
    """Debug form: always shows a fraction, switches to an exponent at the extremes."""
    special = _special(value)
    if special is not None:
        return special
    magnitude = abs(value)
    if magnitude != 0.0 and (magnitude >= 1e16 or magnitude < 1e-4):
        mantissa, exponent = f"{float(value):e}".split("e")
        digits = repr(float(f"{mantissa}e0"))
        if digits.endswith(".0"):
            digits = digits[:-2]
        return f"{digits}e{int(exponent)}"
    text = _display(value)
    return text if "." in text else f"{text}.0"


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    rounded = math.floor(abs(value) + 0.5)
    rounded = rounded if value >= 0 else -rounded
    return max(_I32_MIN, min(_I32_MAX, rounded))


def _to_i32(value: int) -> int:
    value &= _U32_MASK
    return value - 2**32 if value > _I32_MAX else value


def _to_u32(value: int) -> int:
    return value & _U32_MASK


def float_list_to_string(floats: Iterable[float]) -> str:
    """Join the floats, each rounded to the nearest integer, with commas."""
    return ",".join(str(_round_half_away(value)) for value in floats)


def _parse_float(text: str) -> float | None:
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def string_to_float_list(float_list: str) -> list[float]:
    """Parse a comma separated list of numbers, dropping entries that are not numbers."""
    parsed = (_parse_float(part.strip()) for part in float_list.split(","))
    return [value for value in parsed if value is not None]


def map_frequency_preset_to_view(preset: FrequencyPresetModel) -> FrequencyPresetView:
    values = preset.values
    return FrequencyPresetView(
        preset_name=preset.frequency_preset_name,
        preset_desc=preset.frequency_preset_desc,
        preset_details=f"frequency1:{_display(values.freq1)} frequency2:{_debug(values.freq2)}",
        freq1=values.freq1,
        freq2=values.freq2,
        freq3=float_list_to_string(values.freq3),
        checked=False,
    )


def map_frequency_preset_from_view(preset: FrequencyPresetView) -> FrequencyPresetModel:
    return FrequencyPresetModel(
        frequency_preset_name=preset.preset_name,
        frequency_preset_desc=preset.preset_desc,
        values=FrequencyModel(
            freq1=preset.freq1,
            freq2=preset.freq2,
            freq3=string_to_float_list(preset.freq3),
        ),
    )


def map_power_preset_to_view(preset: PowerPresetModel) -> PowerPresetView:
    values = preset.values
    return PowerPresetView(
        preset_name=preset.power_preset_name,
        preset_desc=preset.power_preset_desc,
        preset_details=f"power1:{_display(values.power1)} power2:{_display(values.power2)}",
        checked=False,
        power1=values.power1,
        power2=values.power2,
        power3=values.power3,
        power4=values.power4,
        power5=values.power5,
        power6=values.power6,
        power7=values.power7,
        power8=values.power8,
        power9=_to_i32(values.power9),
        power10=_to_i32(values.power10),
    )


def map_power_preset_from_view(preset: PowerPresetView) -> PowerPresetModel:
    return PowerPresetModel(
        power_preset_name=preset.preset_name,
        power_preset_desc=preset.preset_desc,
        values=PowerModel(
            power1=preset.power1,
            power2=preset.power2,
            power3=preset.power3,
            power4=preset.power4,
            power5=preset.power5,
            power6=preset.power6,
            power7=preset.power7,
            power8=preset.power8,
            power9=_to_u32(preset.power9),
            power10=_to_u32(preset.power10),
        ),
    )


def map_mission_to_view(mission: MissionModel) -> MissionView:
    power_view = map_power_preset_to_view(mission.power_model)
    frequency_view = map_frequency_preset_to_view(mission.frequency_model)
    return MissionView(
        mission_name=mission.mission_name,
        mission_desc=mission.mission_desc,
        mission_id=mission.mission_id,
        mission_details=f"{frequency_view.preset_details} power:{power_view.preset_name}",
        power_model=power_view,
        frequency_model=frequency_view,
        checked=False,
    )


def map_mission_from_view(mission: MissionView) -> MissionModel:
    """Build a mission from its view; the flag is always cleared."""
    return MissionModel(
        mission_name=mission.mission_name,
        mission_desc=mission.mission_desc,
        mission_id=mission.mission_id,
        power_model=map_power_preset_from_view(mission.power_model),
        flagged=False,
        frequency_model=map_frequency_preset_from_view(mission.frequency_model),
    )