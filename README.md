# missiondesk

Building blocks for an application that manages four kinds of records:

- **tasks**: a title, a priority, a due date in milliseconds since the epoch and a done flag
- **power presets**: a name, a description and ten power values
- **frequency presets**: a name, a description and three frequency values, the last a list
- **missions**: a name, an id, a description, a flag, one power preset and one frequency preset

The package provides the record types, repository interfaces with in-memory
implementations, repositories pre-filled with sample records, a single-slot
callback, and functions that turn records into flat view structures and back.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Quick start

```python
from missiondesk.models import TaskModel
from missiondesk.sample_data import task_repo, mission_repo
from missiondesk.task_views import map_task_to_item
from missiondesk.preset_views import map_mission_to_view, map_mission_from_view

tasks = task_repo()
tasks.push_task(TaskModel(title="Calibrate", priority="low", due_date=1717986537151))
tasks.toggle_done(0)

for index in range(tasks.task_count()):
    item = map_task_to_item(tasks.get_task(index))
    print(item.text, item.checked, item.priority, item.description)
    # e.g. "Power on True low Mon, Jun 10, 2024 02:28"

missions = mission_repo()
view = map_mission_to_view(missions.get_mission(0))
print(view.mission_details)  # frequency details followed by " power:<preset name>"
missions.update_mission(0, map_mission_from_view(view))
```

## Modules

### `missiondesk.callback`

`Callback(default=None)` holds at most one handler. `on(handler)` replaces
the handler; `invoke(*args)` calls it with the arguments and returns its
result. With no handler set, `invoke` returns `default`. While the handler
runs it is taken out of the slot, so a call to `invoke` from inside the
handler also returns `default`.

### `missiondesk.models`

Dataclasses with defaults for every field:

- `DateModel(year, month, day)` and `TimeModel(hour, minute, second)` (frozen)
- `TaskModel(title, priority, due_date, done)`
- `PowerModel(power1 … power8` as floats, `power9, power10` as ints`)`
- `PowerPresetModel(power_preset_name, power_preset_desc, values)`
- `FrequencyModel(freq1, freq2, freq3)` where `freq3` is a list of floats
- `FrequencyPresetModel(frequency_preset_name, frequency_preset_desc, values)`
- `MissionModel(mission_name, mission_desc, mission_id, frequency_model, power_model, flagged)`

### `missiondesk.repositories`

Abstract interfaces `DateTimeRepository`, `TaskRepository`,
`MissionRepository`, `PowerPresetRepository` and `FrequencyPresetRepository`,
and in-memory implementations:

- `MockDateTimeRepository(current_date, current_time, time_stamp)` returns the
  values it was given; `date_to_string` gives `"year/month/day"` and
  `time_to_string` gives `"hour:minute"`, both without zero padding.
  `time_stamp(date, time)` always returns the fixed stamp.
- `MockTaskRepository`, `MockMissionRepository`, `MockPowerPresetRepository`
  and `MockFrequencyPresetRepository` keep their records in a list.
  `get_…` returns an independent copy of the record, or `None` for an index
  out of range. `remove_…`, `update_…` and `toggle_done` return `False` for an
  index out of range and `True` otherwise; `push_…` appends and returns `True`.

### `missiondesk.sample_data`

`date_time_repo()`, `task_repo()`, `mission_repo()`, `power_preset_repo()`
and `frequency_preset_repo()` return new repositories filled with sample
records: a clock fixed at 2025-01-01 16:43:00, three open tasks of low, medium
and high priority, two missions, two power presets and two frequency presets.

### `missiondesk.task_views`

View structures `Date`, `Time` and `SelectionListViewItem`, with
`map_task_to_item` (the due date is shown in UTC as e.g.
`"Mon, Jun 10, 2024 02:28"`; a date beyond the representable range raises
`ValueError`) and the conversions `map_date_model_to_date`,
`map_date_to_date_model`, `map_time_model_to_time` and
`map_time_to_time_model`.

### `missiondesk.preset_views`

View structures `PowerPresetView`, `FrequencyPresetView` and `MissionView`,
and the mappings `map_power_preset_to_view` / `map_power_preset_from_view`,
`map_frequency_preset_to_view` / `map_frequency_preset_from_view` and
`map_mission_to_view` / `map_mission_from_view`. Views built from records
have `checked` cleared and a `preset_details` or `mission_details` summary;
missions built from views have `flagged` cleared.

- `float_list_to_string(floats)` rounds each value to the nearest integer
  (halves away from zero) and joins them with commas, so `[1.4, 2.5]` becomes
  `"1,3"`.
- `string_to_float_list(text)` splits on commas, trims each part and keeps
  only the parts that parse as numbers.

Going from a frequency record to its view and back therefore rounds the
values of `freq3` to whole numbers.

## What the package does not do

There are no controllers, no list models that notify listeners of row
changes, and no navigation between pages: the callback and the view mappings
are the pieces such layers would be built from. There is no user interface
and no command to run. Records live only in memory and are lost when the
process ends.

## Running the tests

```
pytest
```