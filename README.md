# sc2kit

Helpers for writing StarCraft II bots: finding and starting the game
executable, collecting replay files, and analysing maps (resource
clustering, expansion locations, placement grids, terrain heights and
openness). It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `sc2kit.properties`: `parse_properties(lines)` and `read_properties(path)`
  read `key = value` files such as the game's `ExecuteInfo.txt`. Keys are
  stripped, values lose leading whitespace, and keys starting with `#` are
  skipped.
- `sc2kit.paths`: `default_executable(env, user_dir, system)` finds the
  newest installed game binary, starting from `SC2PATH` and the
  `executable` entry of `ExecuteInfo.txt`. `sc2_path` returns the game root
  above a `Versions` folder, `bin_path` the binary's path inside a version
  folder, `path_for_build` the executable of a given base build,
  `user_directory` the per-user data folder and `subdirs` the sorted
  subfolders of a directory.
- `sc2kit.launch`: `launch_args` builds the command line for an instance
  listening on an address and port (windowed, with an optional data
  version and extra arguments), `start_process` starts it and returns the
  `subprocess.Popen`, `working_directory` gives the Windows `Support` /
  `Support64` folder, and `kill_processes` kills a list of PIDs.
  `PortAllocator.next_port()` hands out ports counting up from 8169.
  `LaunchSettings` is a dataclass holding the base build, data version,
  extra arguments, realtime flag, connect timeout, network address and
  the raw/score interface flags.
- `sc2kit.maps`: the ladder map pools (`MAPS` and older seasons),
  `random_1v1_map(rng)` and `map_path(map_name, sc2_root, system)`.
- `sc2kit.replays`: `replays_in_dir(path)` lists the `.SC2Replay` files of
  a directory as sorted absolute paths, or returns a single replay path.
  `is_replay_file(ext)` checks an extension, ignoring case.
- `sc2kit.cluster`: `Point`, `Unit`, `Alliance`, `UnitCluster` (a group of
  units with its centre of mass) and `cluster(units, distance)`, which
  adds each unit to the nearest cluster centre within `distance`.
- `sc2kit.dbscan`: `DBSCAN` clusters the units in its `units` dict
  (keyed by tag) and returns clusters and outliers.
- `sc2kit.height_map`: `ByteGrid`, a byte grid that reads 0 and ignores
  writes outside its bounds, and `HeightMap` with bilinear
  `interpolate(x, y)`.
- `sc2kit.openness`: `compute_depth(placement, pathing)` and
  `compute_openness(placement, pathing)`.
- `sc2kit.expansions`: `calculate_base_locations(resources, placement)`
  clusters resources and finds the town hall location for each cluster;
  `base_loc_color` maps placement values to display colours.
- `sc2kit.placement`: `unit_placement_size(unit)` estimates a structure's
  footprint from its radius, and `PlacementGrid` tracks structures from
  `update(units)` and answers `can_place(unit, pos)`.
- `sc2kit.bases`: `Base`, `Bases` and `GameMap` track base ownership,
  workers, gas buildings and remaining minerals, give walking distances
  (from an optional path query callback) and answer nearest-base queries.

## Example

```python
from sc2kit.cluster import Point, Unit, cluster

units = [
    Unit(tag=1, pos=Point(10, 10)),
    Unit(tag=2, pos=Point(11, 10)),
    Unit(tag=3, pos=Point(50, 50)),
]
for group in cluster(units, 15):
    print(group.count(), group.center())
```

Launching an instance:

```python
from sc2kit.launch import PortAllocator, launch_args, start_process
from sc2kit.paths import default_executable

ports = PortAllocator()
exe = default_executable()
proc = start_process(exe, launch_args("127.0.0.1", ports.next_port()))
```

## What it does not do

sc2kit does not talk to the game. It has no client for the game's
protocol, so it cannot create or join matches, run a bot's step loop,
start replays or draw debug shapes in-game. Units, grids and path lengths
must be supplied by the caller from their own observations. There is no
command-line program.