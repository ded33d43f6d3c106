"""Density-based clustering of units."""

from __future__ import annotations

from .cluster import Point, Unit, UnitCluster


class DBSCAN:
    """Clusters the units in :attr:`units`, keyed by their tag."""

    def __init__(self) -> None:
        self.units: dict[int, Unit] = {}

    def _neighbors(self, pos: Point, eps2: float) -> list[int]:
        return [tag for tag, u in self.units.items() if pos.distance2(u.pos) <= eps2]

    def cluster(self, min_pts: int, eps: float) -> tuple[list[UnitCluster], list[Unit]]:
        """Return the clusters and the outliers.

        A unit with fewer than ``min_pts`` units (itself included) within ``eps``
        starts no cluster and is reported as an outlier, though it may still be
        taken into a cluster later as a neighbour of a core unit.
        """
        eps2 = eps * eps
        clustered: set[int] = set()
        clusters: list[UnitCluster] = []
        outliers: list[Unit] = []

        def add_neighbors(target: UnitCluster, tags: list[int]) -> None:
            for tag in tags:
                if tag not in clustered:
                    target.add(self.units[tag])
                    clustered.add(tag)

        for tag, unit in self.units.items():
            if tag in clustered:
                continue
            neighbors = self._neighbors(unit.pos, eps2)
            if len(neighbors) < min_pts:
                outliers.append(unit)
                continue

            current = UnitCluster([unit])
            clusters.append(current)
            clustered.add(unit.tag)
            add_neighbors(current, neighbors)

            for member in current:
                member_neighbors = self._neighbors(member.pos, eps2)
                if len(member_neighbors) >= min_pts:
                    add_neighbors(current, member_neighbors)

        return clusters, outliers