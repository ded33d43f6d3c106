"""Finding town hall locations for each resource cluster."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .cluster import Point, Unit, UnitCluster, cluster
from .height_map import ByteGrid

RESOURCE_CLUSTER_DISTANCE = 15
MINERAL_WALL_NAME = "MineralField450"

WHITE = (255, 255, 255)
RED = (255, 1, 1)
BLUE = (1, 1, 255)
GREEN = (1, 255, 1)


@dataclass
class BaseLocation:
    """A resource cluster and the best town hall location for it."""

    resources: UnitCluster
    location: Point


def mark_unbuildable(placement: ByteGrid, px: int, py: int, w: int, h: int) -> None:
    """Mark the area around a ``w`` x ``h`` footprint, minus corners, as too close (1)."""
    x_min, x_max = px - 3, px + w + 2
    y_min, y_max = py - 3, py + h + 2
    for y in range(y_min, y_max + 1):
        for x in range(x_min, x_max + 1):
            if y in (y_min, y_max) and x in (x_min, x_max):
                continue
            if placement.get(x, y) == 255:
                placement.set(x, y, 1)


def expand_unbuildable(placement: ByteGrid, px: int, py: int) -> None:
    """Mark buildable cells within 2 of ``px, py`` as unable to hold a centre (128)."""
    for y in range(py - 2, py + 3):
        for x in range(px - 2, px + 3):
            if placement.get(x, y) == 255:
                placement.set(x, y, 128)


def base_loc_color(value: int, pathable: bool) -> tuple[int, int, int] | None:
    """Display colour for a placement value, or None for nothing to show."""
    if value == 255:
        return WHITE
    if value == 128:
        return BLUE
    if value == 1:
        return RED
    if pathable:
        return GREEN
    return None


def _nearest_free_cell(placement: ByteGrid, pt: Point) -> tuple[int, int]:
    px, py = int(pt.x), int(pt.y)
    r2_min, best = 256, (-1, -1)
    r = 0
    while r * r <= r2_min:
        x_min, x_max, y_min, y_max = px - r, px + r, py - r, py + r
        for y in range(y_min, y_max + 1):
            for x in range(x_min, x_max + 1):
                on_edge = x in (x_min, x_max) or y in (y_min, y_max)
                if on_edge and placement.get(x, y) == 255:
                    dx, dy = x - px, y - py
                    r2 = dx * dx + dy * dy
                    if r2 < r2_min:
                        r2_min, best = r2, (x, y)
        r += 1
    return best


def calculate_base_locations(
    resources: Iterable[Unit], placement: ByteGrid
) -> list[BaseLocation]:
    """Cluster neutral resources and find the town hall location for each cluster.

    ``placement`` holds 255 for buildable cells; it is not modified. A cluster
    without any free cell nearby gets the location (-0.5, -0.5).
    """
    resources = list(resources)
    clusters = cluster(
        (u for u in resources if u.name != MINERAL_WALL_NAME),
        RESOURCE_CLUSTER_DISTANCE,
    )

    grid = placement.copy()
    for u in resources:
        if u.has_minerals:
            mark_unbuildable(grid, int(u.pos.x - 0.5), int(u.pos.y), 2, 1)
    for u in resources:
        if u.has_vespene:
            mark_unbuildable(grid, int(u.pos.x - 1), int(u.pos.y - 1), 3, 3)

    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get(x, y) < 128:
                expand_unbuildable(grid, x, y)

    locations = []
    for resource_cluster in clusters:
        bx, by = _nearest_free_cell(grid, resource_cluster.center())
        locations.append(BaseLocation(resource_cluster, Point(bx + 0.5, by + 0.5)))
    return locations