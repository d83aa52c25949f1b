import pytest

from missiondesk.models import (
    FrequencyModel,
    FrequencyPresetModel,
    MissionModel,
    PowerModel,
    PowerPresetModel,
)
from missiondesk.preset_views import (
    FrequencyPresetView,
    MissionView,
    PowerPresetView,
    float_list_to_string,
    map_frequency_preset_from_view,
    map_frequency_preset_to_view,
    map_mission_from_view,
    map_mission_to_view,
    map_power_preset_from_view,
    map_power_preset_to_view,
    string_to_float_list,
)


def _power_preset():
    return PowerPresetModel(
        power_preset_name="power1",
        power_preset_desc="desc",
        values=PowerModel(
            power1=1.1, power2=1.2, power3=3.2, power4=1.1, power5=1.1,
            power6=1.1, power7=1.1, power8=1.1, power9=1, power10=1,
        ),
    )


def _frequency_preset(freq3=None):
    return FrequencyPresetModel(
        frequency_preset_name="frequency1",
        frequency_preset_desc="desc",
        values=FrequencyModel(freq1=1.1, freq2=1.1, freq3=freq3 if freq3 is not None else [1.0, 2.0]),
    )


def _mission(flagged=False):
    return MissionModel(
        mission_name="mission1",
        mission_desc="desc",
        mission_id=1,
        frequency_model=_frequency_preset(),
        power_model=_power_preset(),
        flagged=flagged,
    )


def test_string_to_float_list_drops_invalid_entries():
    assert string_to_float_list("1, 2.5,abc,,3") == [1.0, 2.5, 3.0]


def test_string_to_float_list_empty_and_underscore():
    assert string_to_float_list("") == []
    assert string_to_float_list("1_0") == []


def test_float_list_to_string_empty():
    assert float_list_to_string([]) == ""


def test_float_list_to_string_rounds_half_away_from_zero():
    assert float_list_to_string([0.5, -0.5, 2.5]) == "1,-1,3"


def test_float_list_round_trip_of_integers():
    values = [1.0, 20.0, -3.0]
    assert string_to_float_list(float_list_to_string(values)) == values


def test_frequency_details_display_and_debug_forms():
    preset = FrequencyPresetModel(
        frequency_preset_name="f",
        frequency_preset_desc="d",
        values=FrequencyModel(freq1=2.0, freq2=3.0, freq3=[]),
    )
    view = map_frequency_preset_to_view(preset)
    assert view.preset_details == "frequency1:2 frequency2:3.0"
    assert view.freq3 == ""


def test_frequency_view_fields():
    view = map_frequency_preset_to_view(_frequency_preset())
    assert view.preset_name == "frequency1"
    assert view.preset_desc == "desc"
    assert view.freq1 == 1.1
    assert view.freq3 == "1,2"
    assert view.checked is False
    assert view.preset_details.startswith("frequency1:1.1 frequency2:1.1")


def test_frequency_round_trip():
    preset = _frequency_preset()
    assert map_frequency_preset_from_view(map_frequency_preset_to_view(preset)) == preset


def test_frequency_from_view_parses_csv():
    view = FrequencyPresetView(preset_name="n", preset_desc="d", freq1=1.5, freq2=2.5, freq3="4, x, 5")
    model = map_frequency_preset_from_view(view)
    assert model.frequency_preset_name == "n"
    assert model.values.freq3 == [4.0, 5.0]
    assert model.values.freq2 == 2.5


def test_power_view_fields():
    view = map_power_preset_to_view(_power_preset())
    assert view.preset_name == "power1"
    assert view.preset_details.startswith("power1:1.1 power2:1.2")
    assert view.power9 == 1
    assert view.checked is False


def test_power_round_trip():
    preset = _power_preset()
    assert map_power_preset_from_view(map_power_preset_to_view(preset)) == preset


def test_power_negative_view_value_wraps_and_returns():
    view = PowerPresetView(preset_name="p", power9=-1, power10=-5)
    model = map_power_preset_from_view(view)
    assert model.values.power9 >= 0
    assert model.values.power10 >= 0
    back = map_power_preset_to_view(model)
    assert back.power9 == -1
    assert back.power10 == -5


def test_mission_view_fields():
    view = map_mission_to_view(_mission())
    assert view.mission_name == "mission1"
    assert view.mission_id == 1
    assert view.checked is False
    assert view.mission_details.startswith(view.frequency_model.preset_details)
    assert view.mission_details.endswith(" power:power1")


def test_mission_round_trip():
    mission = _mission()
    assert map_mission_from_view(map_mission_to_view(mission)) == mission


def test_mission_from_view_clears_flag():
    model = map_mission_from_view(map_mission_to_view(_mission(flagged=True)))
    assert model.flagged is False
    assert model.power_model == _power_preset()


def test_default_mission_view_maps_to_default_model():
    assert map_mission_from_view(MissionView()) == MissionModel()


@pytest.mark.parametrize("values", [[], [7.0], [1.0, -2.0, 3.0]])
def test_frequency_preset_csv_preserved_through_views(values):
    preset = _frequency_preset(freq3=values)
    view = map_frequency_preset_to_view(preset)
    assert map_frequency_preset_from_view(view).values.freq3 == values