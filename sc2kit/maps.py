"""Ladder map pools and map path resolution."""

from __future__ import annotations

import os
import random

from .paths import _system_name

MAPS_2018_S3 = (
    "AcidPlantLE",
    "BlueshiftLE",
    "CeruleanFallLE",
    "DreamcatcherLE",
    "FractureLE",
    "LostAndFoundLE",
    "ParaSiteLE",
)

MAPS_2018_S4 = (
    "AutomatonLE",
    "BlueshiftLE",
    "CeruleanFallLE",
    "DarknessSanctuaryLE",
    "KairosJunctionLE",
    "ParaSiteLE",
    "PortAleksanderLE",
)

MAPS_2019_LADDER8_PRE2 = (
    "Acropolis",
    "Artana",
    "CrystalCavern",
    "DigitalFrontier",
    "OldSunshine",
    "Treachery",
    "Triton",
)

MAPS_2019_LADDER8 = (
    "AcropolisLE",
    "DiscoBloodbathLE",
    "EphemeronLE",
    "ThunderbirdLE",
    "TritonLE",
    "WintersGateLE",
    "WorldofSleepersLE",
)

MAPS_2021_SEASON1 = (
    "DeathAura506",
    "EternalEmpire506",
    "EverDream506",
    "GoldenWall506",
    "IceandChrome506",
    "PillarsofGold506",
    "Submarine506",
)

MAPS = (
    "BerlingradAIE",
    "HardwireAIE",
    "InsideAndOutAIE",
    "MoondanceAIE",
    "StargazersAIE",
    "WaterfallAIE",
)

MAP_EXTENSION = ".SC2Map"


def random_1v1_map(rng: random.Random | None = None) -> str:
    """Return a random map file name from the current 1v1 pool."""
    chooser = rng if rng is not None else random.Random()
    return chooser.choice(MAPS) + MAP_EXTENSION


def map_path(map_name: str, sc2_root: str, system: str | None = None) -> str:
    """Return the path the game expects for ``map_name``.

    Outside Windows the map is looked up in the ``Maps`` folder of the game root.
    """
    if (system or _system_name()) != "windows":
        return os.path.join(sc2_root, "Maps", map_name)
    return map_name