import os
import random

from sc2kit.maps import MAPS, MAP_EXTENSION, random_1v1_map, map_path


def _pool_names():
    return {m + MAP_EXTENSION for m in MAPS}


def test_random_map_comes_from_pool():
    rng = random.Random(1)
    names = _pool_names()
    for _ in range(20):
        assert random_1v1_map(rng) in names


def test_random_map_is_reproducible_with_seed():
    picks = [random_1v1_map(random.Random(7)) for _ in range(5)]
    assert len(set(picks)) == 1
    assert picks[0] in _pool_names()


def test_random_map_varies_across_seeds():
    picks = {random_1v1_map(random.Random(seed)) for seed in range(50)}
    assert len(picks) > 1
    assert picks <= _pool_names()


def test_random_map_extension():
    assert random_1v1_map().endswith(".SC2Map")


def test_map_path_linux_uses_maps_dir():
    assert map_path("A.SC2Map", "/sc2", "linux") == os.path.join("/sc2", "Maps", "A.SC2Map")


def test_map_path_windows_is_name_only():
    assert map_path("A.SC2Map", "/sc2", "windows") == "A.SC2Map"