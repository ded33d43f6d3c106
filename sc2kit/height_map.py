"""Byte grids and terrain height lookup."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class ByteGrid:
    """A width x height grid of byte values, stored row by row.

    Reads outside the grid give 0 and writes outside it are ignored.
    """

    width: int
    height: int
    data: bytearray = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("grid dimensions must not be negative")
        if self.data is None:
            self.data = bytearray(self.width * self.height)
        else:
            self.data = bytearray(self.data)
            if len(self.data) != self.width * self.height:
                raise ValueError(
                    f"expected {self.width * self.height} bytes, got {len(self.data)}"
                )

    @classmethod
    def from_bits(cls, width: int, height: int, bits: Iterable[bool]) -> ByteGrid:
        """Build a grid with 255 where ``bits`` is true and 0 elsewhere."""
        return cls(width, height, bytearray(255 if b else 0 for b in bits))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> ByteGrid:
        """Build a grid from rows indexed by y, each holding values indexed by x."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("rows differ in length")
        return cls(width, height, bytearray(v for row in rows for v in row))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return 0
        return self.data[y * self.width + x]

    def set(self, x: int, y: int, value: int) -> None:
        if self.in_bounds(x, y):
            self.data[y * self.width + x] = value

    def copy(self) -> ByteGrid:
        return ByteGrid(self.width, self.height, bytearray(self.data))


_OUTSIDE_HEIGHT = -127 / 8


@dataclass(frozen=True)
class HeightMap:
    """Terrain heights decoded from the game's height grid."""

    data: ByteGrid

    def width(self) -> int:
        return self.data.width + 1

    def height(self) -> int:
        return self.data.height + 1

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width() and 0 <= y < self.height()

    def get(self, x: int, y: int) -> float:
        return self._decode(x, y)

    def interpolate(self, x: float, y: float) -> float:
        """Bilinearly interpolated height at fractional map coordinates."""
        x0, y0 = int(x), int(y)
        f00 = self._decode(x0, y0)
        f01 = self._decode(x0, y0 + 1)
        f10 = self._decode(x0 + 1, y0)
        f11 = self._decode(x0 + 1, y0 + 1)
        fx, fy = x - x0, y - y0
        return (
            f00 * (1 - fx) * (1 - fy)
            + f01 * (1 - fx) * fy
            + f10 * fx * (1 - fy)
            + f11 * fx * fy
        )

    def _decode(self, x: int, y: int) -> float:
        if self.data.in_bounds(x, y):
            return (self.data.get(x, y) - 127) / 8
        return _OUTSIDE_HEIGHT