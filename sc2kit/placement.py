"""Building footprints and a grid of free building cells."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .cluster import Point, Unit
from .height_map import ByteGrid

log = logging.getLogger(__name__)

_SIZE_CACHE: dict[int, tuple[int, int]] = {}


def unit_placement_size(unit: Unit) -> tuple[int, int]:
    """Estimate a structure's footprint ``(width, height)`` from its radius.

    Results are cached per unit type.
    """
    cached = _SIZE_CACHE.get(unit.unit_type)
    if cached is not None:
        return cached

    px, py, radius = unit.pos.x, unit.pos.y, unit.radius

    # Round to the nearest half tile.
    hx, hy = int(px * 2 + 0.5), int(py * 2 + 0.5)
    x, y = hx / 2, hy / 2
    x_even, y_even = hx % 2 == 0, hy % 2 == 0

    # Bounds from the radius the game reports.
    x_min, y_min = int(x - radius + 0.5), int(y - radius + 0.5)
    x_max, y_max = int(x + radius + 0.5), int(y + radius + 0.5)

    # Take the smaller radius where the bounds are not symmetric.
    rx = min(x - x_min, x_max - x)
    ry = min(y - y_min, y_max - y)

    x_min, y_min = int(px - rx + 0.5), int(py - ry + 0.5)
    x_max, y_max = int(px + rx + 0.5), int(py + ry + 0.5)

    # Non-square structures such as mineral fields.
    if x_even != y_even:
        if y_even:
            x_min += 1
            x_max -= 1
        else:
            y_min += 1
            y_max -= 1

    size = (x_max - x_min, y_max - y_min)
    _SIZE_CACHE[unit.unit_type] = size
    log.debug("%s %s %s -> %s", unit.unit_type, unit.pos, unit.radius, size)
    return size


@dataclass(frozen=True)
class _StructureInfo:
    point: Point
    size: tuple[int, int]


def _footprint(pos: Point, size: tuple[int, int]):
    x_min = int(pos.x - size[0] / 2)
    y_min = int(pos.y - size[1] / 2)
    for y in range(y_min, y_min + size[1]):
        for x in range(x_min, x_min + size[0]):
            yield x, y


class PlacementGrid:
    """The map's placement grid with the footprints of known structures removed."""

    def __init__(self, placement: ByteGrid, units: Iterable[Unit] = ()) -> None:
        self.raw = placement.copy()
        self.grid = placement.copy()
        self._structures: dict[int, _StructureInfo] = {}
        self.update(units)

    def _mark(self, pos: Point, size: tuple[int, int], free: bool) -> None:
        value = 255 if free else 0
        for x, y in _footprint(pos, size):
            self.grid.set(x, y, value)

    def _check(self, pos: Point, size: tuple[int, int], free: bool) -> bool:
        return all(bool(self.grid.get(x, y)) == free for x, y in _footprint(pos, size))

    def update(self, units: Iterable[Unit]) -> None:
        """Track the structures among ``units``, freeing cells of ones that are gone or moved."""
        units = list(units)
        by_tag = {u.tag: u for u in units}

        for tag, info in list(self._structures.items()):
            current = by_tag.get(tag)
            if (
                current is None
                or not current.is_structure
                or current.pos != info.point
                or unit_placement_size(current) != info.size
            ):
                self._mark(info.point, info.size, True)
                del self._structures[tag]

        for u in units:
            if u.is_structure and u.tag not in self._structures:
                info = _StructureInfo(u.pos, unit_placement_size(u))
                self._mark(info.point, info.size, False)
                self._structures[u.tag] = info

    def can_place(self, unit: Unit, pos: Point) -> bool:
        """True if a structure like ``unit`` fits at ``pos`` right now."""
        return self._check(pos, unit_placement_size(unit), True)