"""Bases on the map: their resources, owners, workers and walking distances."""

from __future__ import annotations

from collections.abc import Callable, Container, Iterable, Sequence

from .cluster import Alliance, Point, Unit, UnitCluster
from .expansions import BaseLocation

_FAR = float(256 * 256)
SMALL_PATCH_SUFFIX = "750"

PathQuery = Callable[[Sequence[tuple[Point, Point]]], Iterable[float]]


class Base:
    """One expansion location and what was observed around it."""

    def __init__(self, owner: Bases, index: int, location: BaseLocation) -> None:
        # Geysers weigh four times as much to represent unbalanced gas bases.
        weighted = UnitCluster()
        minerals = UnitCluster()
        for u in location.resources:
            if u.has_vespene:
                for _ in range(3):
                    weighted.add(u)
            else:
                minerals.add(u)
            weighted.add(u)

        self._owner = owner
        self.index = index
        self.resource_center = weighted.center()
        self.mineral_center = minerals.center()
        self.minerals: list[Unit] = []
        self.geysers: list[Unit] = []
        self.location = location.location
        self.town_hall: Unit | None = None
        self.gas_buildings: dict[Point, Unit] = {}
        self.self_workers: set[int] = set()
        self.other_workers: set[int] = set()

    def __repr__(self) -> str:
        return f"Base(index={self.index}, location={self.location!r})"

    def update_resource(self, unit: Unit) -> None:
        """Record a mineral field or geyser; raises ValueError for anything else."""
        if unit.has_minerals:
            self._update_or_add(self.minerals, unit)
        elif unit.has_vespene:
            self._update_or_add(self.geysers, unit)
        else:
            raise ValueError(f"unknown resource: {unit!r}")

    def _update_or_add(self, units: list[Unit], unit: Unit) -> None:
        for i, existing in enumerate(units):
            if existing.pos.distance2(unit.pos) < 1:
                if existing.pos != unit.pos:
                    raise ValueError(f"{existing.pos} != {unit.pos}")
                units[i] = unit
                return

        # Keep big patches first, each kind ordered by distance to the base.
        is_small = unit.name.endswith(SMALL_PATCH_SUFFIX)
        dist = unit.pos.distance2(self.location)
        for i, other in enumerate(units):
            other_small = other.name.endswith(SMALL_PATCH_SUFFIX)
            if not other_small and is_small:
                continue
            if is_small != other_small or dist < other.pos.distance2(self.location):
                units.insert(i, unit)
                return
        units.append(unit)

    def prune(self, observed: Container[int]) -> None:
        """Drop exhausted minerals and clear what is recomputed each step."""
        self.minerals[:] = [u for u in self.minerals if u.tag in observed]
        self.town_hall = None
        self.gas_buildings.clear()
        self.self_workers.clear()
        self.other_workers.clear()

    def is_self_owned(self) -> bool:
        return self.town_hall is not None and self.town_hall.alliance == Alliance.SELF

    def is_enemy_owned(self) -> bool:
        return self.town_hall is not None and self.town_hall.alliance == Alliance.ENEMY

    def is_unowned(self) -> bool:
        return self.town_hall is None

    def natural(self) -> Base | None:
        """The closest other base by walking distance."""
        best, min_dist = None, _FAR
        for other in self._owner.bases:
            dist = self.walk_distance(other)
            if 0 < dist < min_dist:
                best, min_dist = other, dist
        return best

    def walk_distance(self, other: Base) -> float:
        """Ground distance between the two bases."""
        return self._owner.distance(self.index, other.index)


class Bases:
    """All bases of a map and the distances between them.

    ``query`` receives a list of ``(start, end)`` pairs, both directions for
    every pair of bases, and returns a path length for each. The larger of the
    two directions and the straight-line distance is kept.
    """

    def __init__(self, locations: Iterable[BaseLocation], query: PathQuery | None = None) -> None:
        locations = list(locations)
        n = len(locations)
        self.bases: list[Base] = []
        self._distances = [0.0] * (n * (n - 1) // 2)
        self._cache: dict[Point, Base | None] = {}

        pairs: list[tuple[Point, Point]] = []
        for j, loc in enumerate(locations):
            base = Base(self, j, loc)
            self.bases.append(base)
            for earlier in self.bases[:j]:
                a, b = earlier.resource_center, base.resource_center
                pairs.append((a, b))
                pairs.append((b, a))
                self._distances[j * (j - 1) // 2 + earlier.index] = a.distance(b)

        if query is not None:
            for k, dist in enumerate(query(pairs)):
                if self._distances[k // 2] < dist:
                    self._distances[k // 2] = dist

    def distance(self, i: int, j: int) -> float:
        """Walking distance between bases ``i`` and ``j``."""
        if i == j:
            return 0.0
        if i > j:
            i, j = j, i
        return self._distances[j * (j - 1) // 2 + i]

    def update(
        self,
        resources: Iterable[Unit],
        units: Iterable[Unit],
        observed: Container[int] | None = None,
    ) -> None:
        """Refresh every base from the current observation.

        ``observed`` holds the tags seen this step; by default the tags of
        ``resources`` and ``units``.
        """
        resources = list(resources)
        units = list(units)
        if observed is None:
            observed = {u.tag for u in resources} | {u.tag for u in units}

        for u in resources:
            base = self.nearest_base(u.pos)
            if base is not None:
                base.update_resource(u)

        for base in self.bases:
            base.prune(observed)

        for u in units:
            base = self.nearest_base(u.pos)
            if base is None:
                continue
            if u.is_town_hall:
                current = base.town_hall
                if current is None or u.pos.distance2(base.location) < current.pos.distance2(
                    base.location
                ):
                    base.town_hall = u
            elif u.is_gas_building:
                base.gas_buildings[u.pos] = u
            elif u.is_worker:
                if u.alliance == Alliance.SELF:
                    base.self_workers.add(u.tag)
                else:
                    base.other_workers.add(u.tag)

    def nearest_base(self, pos: Point) -> Base | None:
        """The base closest to ``pos``, memoised per half tile."""
        key = Point(int(pos.x * 2) / 2, int(pos.y * 2) / 2)
        if key not in self._cache:
            self._cache[key] = self.nearest_base_if(key, lambda _base: True)
        return self._cache[key]

    def nearest_base_if(self, pos: Point, predicate: Callable[[Base], bool]) -> Base | None:
        """The base closest to ``pos`` among those accepted by ``predicate``."""
        best, min_dist = None, _FAR
        for base in self.bases:
            dist = pos.distance2(base.location)
            if dist < min_dist and predicate(base):
                best, min_dist = base, dist
        return best

    def nearest_self_base(self, pos: Point) -> Base | None:
        return self.nearest_base_if(pos, Base.is_self_owned)

    def nearest_enemy_base(self, pos: Point) -> Base | None:
        return self.nearest_base_if(pos, Base.is_enemy_owned)


class GameMap(Bases):
    """The bases of a map together with the player's start location.

    Without an explicit ``start_location`` the first own structure in
    ``units`` gives it. The bases are updated once on construction.
    """

    def __init__(
        self,
        locations: Iterable[BaseLocation],
        start_location: Point | None = None,
        resources: Iterable[Unit] = (),
        units: Iterable[Unit] = (),
        observed: Container[int] | None = None,
        query: PathQuery | None = None,
    ) -> None:
        super().__init__(locations, query)
        units = list(units)
        if start_location is None:
            start_location = next(
                (u.pos for u in units if u.alliance == Alliance.SELF and u.is_structure),
                Point(),
            )
        self.start_location = start_location
        self.update(resources, units, observed)

    def update(
        self,
        resources: Iterable[Unit],
        units: Iterable[Unit],
        observed: Container[int] | None = None,
    ) -> None:
        """Refresh the bases from the current observation."""
        super().update(resources, units, observed)