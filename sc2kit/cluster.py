"""Points, units and simple centre-of-mass clustering."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum


class Alliance(IntEnum):
    """Relationship of a unit's owner to the current player."""

    SELF = 1
    ALLY = 2
    NEUTRAL = 3
    ENEMY = 4


@dataclass(frozen=True)
class Point:
    """A position on the map."""

    x: float = 0.0
    y: float = 0.0

    def distance2(self, other: Point) -> float:
        """Squared distance to ``other``."""
        dx, dy = self.x - other.x, self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(self.distance2(other))


@dataclass(frozen=True)
class Unit:
    """The observed state of a unit that map analysis needs."""

    tag: int
    pos: Point
    unit_type: int = 0
    alliance: Alliance = Alliance.NEUTRAL
    radius: float = 0.0
    name: str = ""
    has_minerals: bool = False
    has_vespene: bool = False
    mineral_contents: int = 0
    vespene_contents: int = 0
    is_snapshot: bool = False
    is_structure: bool = False
    is_town_hall: bool = False
    is_gas_building: bool = False
    is_worker: bool = False


class UnitCluster:
    """A group of units together with their centre of mass."""

    def __init__(self, units: Iterable[Unit] = ()) -> None:
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._units: list[Unit] = []
        for unit in units:
            self.add(unit)

    def clear(self) -> None:
        """Remove every unit from the cluster."""
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._units.clear()

    def add(self, unit: Unit) -> None:
        """Add ``unit`` and update the centre of mass."""
        self._sum_x += unit.pos.x
        self._sum_y += unit.pos.y
        self._units.append(unit)

    def center(self) -> Point:
        """Centre of mass; the origin for an empty cluster."""
        if not self._units:
            return Point()
        n = len(self._units)
        return Point(self._sum_x / n, self._sum_y / n)

    def units(self) -> list[Unit]:
        """The units in the cluster, in the order they were added."""
        return list(self._units)

    def count(self) -> int:
        """Number of units in the cluster."""
        return len(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        # A live iterator: units added while iterating are visited as well.
        return iter(self._units)

    def __repr__(self) -> str:
        return f"UnitCluster(center={self.center()!r}, count={len(self._units)})"


def cluster(units: Iterable[Unit], distance: float) -> list[UnitCluster]:
    """Group units, each joining the nearest cluster within ``distance`` of its centre."""
    max_distance = distance * distance
    clusters: list[UnitCluster] = []
    for unit in units:
        nearest: UnitCluster | None = None
        min_dist = math.inf
        for candidate in clusters:
            d = unit.pos.distance2(candidate.center())
            if d < min_dist:
                min_dist, nearest = d, candidate
        if nearest is None or min_dist > max_distance:
            nearest = UnitCluster()
            clusters.append(nearest)
        nearest.add(unit)
    return clusters