# tourbot

Building blocks for a robot that guides visitors through a laboratory tour.
The package uses only the standard library.

## What is in it

- **`tourbot.actions`** – `ActionType` (`SPEAK`, `DANCE`, `SIGNAL`,
  `INVALID`) and the `Action` dataclass (`type`, `is_blocking`, `param`),
  with `to_dict()` / `Action.from_dict()`. In JSON the type is written as
  `"speak"`, `"dance"`, `"signal"` or `null`; any other value reads back as
  `INVALID`.
- **`tourbot.poi`** – `PoI`, a named point of interest mapping commands to
  lists of actions: `is_command_valid()`, `get_actions()` (raises
  `KeyError` for an unknown command), `available_commands()` and
  `command_multiples_num()`, which counts the commands whose name contains
  the given text.
- **`tourbot.tour`** – `Tour`, points of interest grouped by language plus
  the ordered list of active ones: `available_languages()`,
  `language_supported()`, `set_current_language()` (raises `ValueError`
  for an unknown language), `get_poi(poi_name, lang=None)` (uses the current
  language when `lang` is omitted, raises `KeyError` when not found) and
  `pois_list()`. `Tour.from_dict()` leaves no language selected.
- **`tourbot.tour_storage`** – `TourStorage` with `read_json()`,
  `write_json()` (four-space indent) and `load_tour(path, tour_name)`, which
  stores the tour as `loaded_tour` and returns it; `TourNotFoundError` is
  raised when the name is not in the file.
- **`tourbot.scheduler`** – `SchedulerComponent(tour_path=None,
  tour_name=None)` walks through the active points of interest:
  `update_poi()` moves to the next one, wrapping round, `reset()` goes back
  to the first, and `get_current_poi()` returns a `CurrentPoiResponse`
  with `poi_name`, `poi_number` and `is_ok`. Both raise `LookupError` when
  the tour has no active points of interest.
- **`tourbot.blackboard`** – `BlackboardComponent` keeps named float,
  integer and string values (`get_double`/`set_double`, `get_int`/`set_int`,
  `get_string`/`set_string`). Reads answer with a `GetResponse`, writes with
  a `SetResponse`, both carrying `is_ok` and `error_msg`. An empty field
  name, a NaN float, a zero integer and an empty string are refused as
  missing; overwriting an existing field succeeds with the message
  `"field already present, overwriting"`. Integers must fit in 32 bits.
- **`tourbot.alarm`** – `AlarmComponent(interval=0.5)` logs `"alarm"` from
  a background thread between `start_alarm()` and `stop_alarm()`;
  `stop_alarm()` raises `RuntimeError` if the alarm was never started, and
  `close()` stops it if it is running.
- **`tourbot.navigation`** – `NavigationComponent` wraps any object
  implementing the `Navigator` protocol: `go_to_poi_by_name()`,
  `get_navigation_status()` (a `NavigationStatus`, with unknown values
  reported as `ERROR`), `stop_navigation()` and `check_near_to_poi()`.
  `NavigationClientConfig.from_config()` reads the `NAVIGATION2D-CLIENT`
  group of a configuration mapping, keeping defaults for what is absent,
  and `as_properties()` lists the resulting device properties.
- **`tourbot.bt_nodes`** – `SkillAction` and `SkillCondition` forward ticks
  (and, for actions, halts) to skill services obtained from a `connect`
  callable, and turn the reported `SkillStatus` into a `NodeStatus`.
  Their ports are `nodeName`, `interface` and `isMonitored`; with
  `isMonitored="true"` the service names get a `_mon` suffix.
  `FlipFlopCondition` succeeds thirty times then fails once;
  `AlwaysRunning` always reports `RUNNING`.

The scheduler, blackboard, alarm and navigation components list their
handlers through `services()`, keyed by service name (for example
`/SchedulerComponent/UpdatePoi`), so they can be attached to whatever
transport the robot uses.

## Tour files

A tour file is a JSON object mapping tour names to tours:

```json
{
  "lab": {
    "m_availablePoIs": {
      "english": {
        "entrance": {
          "m_name": "entrance",
          "m_availableActions": {
            "explain": [
              {"m_type": "speak", "m_isBlocking": true, "m_param": "Welcome!"}
            ]
          }
        }
      }
    },
    "m_activeTourPoIs": ["entrance"]
  }
}
```

## Example

```python
from tourbot.scheduler import SchedulerComponent

scheduler = SchedulerComponent("tours.json", "lab")
tour = scheduler.tour
tour.set_current_language("english")

print(tour.pois_list())                     # ['entrance']
print(scheduler.get_current_poi().poi_name) # 'entrance'

poi = tour.get_poi("entrance")
for action in poi.get_actions("explain"):
    print(action.type, action.param)
```

## What it does not do

- It has no command-line programs and no transport: `services()` only
  returns handlers, and nothing here serves them over a network.
- It has no navigation driver; a `Navigator` implementation must be
  supplied.
- The behaviour-tree nodes are single leaves. There is no tree builder,
  tree file loader, tick loop or logger, and skill clients come from the
  `connect` callable you pass in.

## Tests

The test suite uses pytest; install the package with its `test` extra to
get it.