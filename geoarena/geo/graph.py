from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable, Collection, Mapping, Sequence
from types import MappingProxyType

from geoarena.geo.errors import AdjacencyAsymmetryError, UnknownCountryError

ContinentFilter = Callable[[str], bool]


def _accept_all(code: str) -> bool:
    del code
    return True


class CountryGraph:
    """Undirected land-border graph keyed by ISO alpha-2 code.

    Neighbor order is the stored adjacency order; breadth-first search visits
    neighbors in that order, so shortest paths are deterministic.
    """

    __slots__ = ("_adjacency", "_connected")

    def __init__(
        self,
        adjacency: Mapping[str, Sequence[str]],
        *,
        known_codes: Collection[str] | None = None,
    ) -> None:
        frozen = {code: tuple(neighbors) for code, neighbors in adjacency.items()}
        _validate_adjacency(frozen, known_codes=known_codes)
        self._adjacency = MappingProxyType(frozen)
        self._connected = tuple(frozen)

    def __contains__(self, code: object) -> bool:
        return code in self._adjacency

    @property
    def connected_codes(self) -> tuple[str, ...]:
        return self._connected

    def has_land_borders(self, code: str) -> bool:
        return code in self._adjacency

    def neighbors(self, code: str) -> tuple[str, ...]:
        return self._adjacency.get(code, ())

    def is_neighbor(self, current: str, candidate: str) -> bool:
        return candidate in self._adjacency.get(current, ())

    def edges(self) -> list[tuple[str, str]]:
        return [(source, target) for source, targets in self._adjacency.items() for target in targets]

    def shortest_path(
        self,
        start: str,
        end: str,
        exclude: Collection[str] | None = None,
    ) -> list[str] | None:
        """Path from `start` to `end` inclusive, or None when unreachable.

        Excluded codes are never entered, whether as an intermediate step or
        as the target.
        """
        if start == end:
            return [start]
        if start not in self._adjacency or end not in self._adjacency:
            return None

        excluded = exclude or ()
        queue: deque[list[str]] = deque([[start]])
        visited = {start}

        while queue:
            path = queue.popleft()
            for neighbor in self._adjacency.get(path[-1], ()):
                if neighbor in visited or neighbor in excluded:
                    continue
                next_path = [*path, neighbor]
                if neighbor == end:
                    return next_path
                visited.add(neighbor)
                queue.append(next_path)

        return None

    def distance(self, start: str, end: str) -> int:
        path = self.shortest_path(start, end)
        return len(path) - 1 if path is not None else -1

    def countries_at_distance(
        self,
        start: str,
        distance: int,
        accept: ContinentFilter = _accept_all,
    ) -> list[str]:
        """Frontier exactly `distance` hops out, exploring only accepted codes."""
        if start not in self._adjacency:
            return []

        visited = {start}
        frontier = [start]
        depth = 0
        while depth < distance and frontier:
            next_frontier: list[str] = []
            for code in frontier:
                for neighbor in self._adjacency.get(code, ()):
                    if neighbor in visited or not accept(neighbor):
                        continue
                    visited.add(neighbor)
                    next_frontier.append(neighbor)
            frontier = next_frontier
            depth += 1

        return frontier

    def random_connected(
        self,
        accept: ContinentFilter = _accept_all,
        *,
        rng: random.Random | None = None,
    ) -> str:
        resolved_rng = rng or random.Random()
        candidates = [code for code in self._connected if accept(code)]
        if not candidates:
            candidates = list(self._connected)
        return resolved_rng.choice(candidates)


def _validate_adjacency(
    adjacency: Mapping[str, tuple[str, ...]],
    *,
    known_codes: Collection[str] | None,
) -> None:
    if known_codes is not None:
        unknown = sorted(
            {code for code in adjacency if code not in known_codes}
            | {neighbor for neighbors in adjacency.values() for neighbor in neighbors if neighbor not in known_codes}
        )
        if unknown:
            raise UnknownCountryError(f"adjacency references unknown codes: {', '.join(unknown)}")

    problems: list[str] = []
    for code, neighbors in adjacency.items():
        if code in neighbors:
            problems.append(f"{code}->{code}")
        if len(set(neighbors)) != len(neighbors):
            problems.append(f"{code} lists a neighbor twice")
        for neighbor in neighbors:
            if code not in adjacency.get(neighbor, ()):
                problems.append(f"{code}->{neighbor} without {neighbor}->{code}")
    if problems:
        raise AdjacencyAsymmetryError("; ".join(problems))
