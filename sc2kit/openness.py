"""Distance-like openness values for every map cell."""

from __future__ import annotations

from .height_map import ByteGrid


def _offsets4(x: int, y: int) -> tuple[tuple[int, int], ...]:
    return ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))


def compute_depth(placement: ByteGrid, pathing: ByteGrid) -> tuple[ByteGrid, int]:
    """Spread depth values out from the unbuildable cells.

    ``pathing`` holds 255 for set cells; those that are buildable in
    ``placement`` become 0 and the rest seed the search. Every other cell gets
    one less than its highest neighbour. Returns the depth grid and its lowest
    computed value. Raises RuntimeError when some cells cannot be reached.
    """
    depth = pathing.copy()
    processed: set[tuple[int, int]] = set()
    todo: set[tuple[int, int]] = set()

    for y in range(depth.height):
        for x in range(depth.width):
            if depth.get(x, y) == 255:
                if placement.get(x, y):
                    depth.set(x, y, 0)
                else:
                    todo.add((x, y))

    lowest = 255
    while todo:
        current, todo = todo, set()
        for x, y in sorted(current):
            neighbors = _offsets4(x, y)
            if depth.get(x, y) != 255:
                value = (max(depth.get(nx, ny) for nx, ny in neighbors) - 1) & 0xFF
                depth.set(x, y, value)
                lowest = min(lowest, value)
            processed.add((x, y))
            for n in neighbors:
                if depth.in_bounds(*n) and n not in processed:
                    todo.add(n)

    total = depth.width * depth.height
    if len(processed) != total:
        raise RuntimeError(f"only processed {len(processed)} of {total} cells")
    return depth, lowest


def compute_openness(placement: ByteGrid, pathing: ByteGrid) -> ByteGrid:
    """Openness of every cell: 255 minus its depth."""
    depth, _ = compute_depth(placement, pathing)
    depth.data = bytearray(255 - v for v in depth.data)
    return depth