"""Generation of relation topologies and of their neighbourhoods."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Sequence
from itertools import combinations

from scenemodel.connectivity import ConnectivityChecker
from scenemodel.relation import Relation
from scenemodel.topology import Topology

logger = logging.getLogger(__name__)


def _bits_to_string(bits: Sequence[bool]) -> str:
    return "".join("1" if bit else "0" for bit in bits)


class TopologyCreator:
    """Creates topologies over a fixed list of object types.

    A topology is encoded as a bit vector with one bit per unordered pair of
    object types, in the order (0,1), (0,2), ..., (0,n-1), (1,2), ..., (n-2,n-1).
    """

    def __init__(
        self,
        all_object_types: Sequence[str],
        max_neighbour_count: int,
        remove_relations: bool,
        swap_relations: bool,
        rng: random.Random | None = None,
    ) -> None:
        self.all_object_types = list(all_object_types)
        self.max_neighbour_count = max_neighbour_count
        self.remove_relations = remove_relations
        self.swap_relations = swap_relations
        self._rng = rng if rng is not None else random.Random()
        self._checker = ConnectivityChecker(len(self.all_object_types))

    @property
    def _num_relations(self) -> int:
        n = len(self.all_object_types)
        return (n - 1) * n // 2

    def _index(self, a: int, b: int) -> int:
        low, high = min(a, b), max(a, b)
        n = len(self.all_object_types)
        return low * n - low * (low + 1) // 2 + (high - low) - 1

    def generate_neighbours(self, from_topology: Topology) -> list[Topology]:
        """Return the connected neighbours of ``from_topology``.

        If there are more than the maximum number of neighbours, a random
        selection of exactly that many is returned.
        """
        bits = self.convert_topology_to_bitvector(from_topology)
        neighbours = self.calculate_neighbours(bits)
        selected = [n for n in neighbours if self._checker.is_connected(n)]
        logger.debug(
            "Generated neighbours: %s; connected: %s",
            " ".join(_bits_to_string(n) for n in neighbours),
            " ".join(_bits_to_string(n) for n in selected),
        )

        if self.max_neighbour_count < len(selected):
            logger.debug(
                "Found %d neighbours, maximum is %d. Selecting random neighbours.",
                len(selected),
                self.max_neighbour_count,
            )
            selected = self.select_random_neighbours(selected)
            if len(selected) != self.max_neighbour_count:
                raise RuntimeError(
                    f"number of randomly selected neighbours ({len(selected)}) "
                    "was not equal to maximum"
                )

        logger.debug("Selected neighbours: %s", " ".join(_bits_to_string(n) for n in selected))
        return [self.convert_bitvector_to_topology(n) for n in selected]

    def generate_star_topologies(self) -> list[Topology]:
        """Return one star topology per object type, centred on that type."""
        pairs = list(combinations(range(len(self.all_object_types)), 2))
        return [
            self.convert_bitvector_to_topology([center in pair for pair in pairs])
            for center in range(len(self.all_object_types))
        ]

    def generate_fully_meshed_topology(self) -> Topology:
        """Return the topology that contains every possible relation."""
        return self.convert_bitvector_to_topology([True] * self._num_relations)

    def generate_random_topology(self) -> Topology:
        """Return a uniformly drawn random connected topology."""
        if not self.all_object_types:
            raise ValueError("no object types to build a topology from")
        while True:
            bits = [bool(self._rng.randint(0, 1)) for _ in range(self._num_relations)]
            if self._checker.is_connected(bits):
                return self.convert_bitvector_to_topology(bits)

    def generate_all_connected_topologies(self) -> list[Topology]:
        """Return every topology reachable from the fully meshed one."""
        fully_meshed = self.generate_fully_meshed_topology()
        result = [fully_meshed]
        to_visit: deque[Topology] = deque([fully_meshed])
        seen = {fully_meshed.identifier}
        visited = 0
        while to_visit:
            current = to_visit.popleft()
            new_neighbours = self.generate_neighbours(current)
            unique = 0
            for neighbour in new_neighbours:
                if neighbour.identifier not in seen:
                    seen.add(neighbour.identifier)
                    to_visit.append(neighbour)
                    result.append(neighbour)
                    unique += 1
            logger.debug(
                "Neighbours of %s: %d found, %d not yet visited.",
                current.identifier,
                len(new_neighbours),
                unique,
            )
            visited += 1
        logger.debug("Visited %d topologies in total.", visited)
        return result

    def select_random_neighbours(self, neighbours: Sequence[Sequence[bool]]) -> list[list[bool]]:
        """Select at most the maximum number of neighbours at random.

        Indices are drawn from a half-normal distribution, so neighbours near
        the front of the list are preferred.
        """
        pool = [list(n) for n in neighbours]
        if len(pool) <= self.max_neighbour_count:
            return pool
        pool.sort(key=len, reverse=True)
        sigma = float(len(pool) // 2)

        selected: list[list[bool]] = []
        for _ in range(self.max_neighbour_count):
            while True:
                index = int(abs(self._rng.gauss(0.0, sigma)))
                if index < len(pool):
                    break
            selected.append(pool.pop(index))
        return selected

    def convert_bitvector_to_topology(self, bits: Sequence[bool]) -> Topology:
        """Build the topology whose relations are the set bits of ``bits``."""
        if len(bits) != self._num_relations:
            raise ValueError(
                f"bit vector has {len(bits)} entries, expected {self._num_relations}"
            )
        relations = [
            Relation(type_a, type_b)
            for (type_a, type_b), bit in zip(combinations(self.all_object_types, 2), bits)
            if bit
        ]
        return Topology(relations=relations, identifier=_bits_to_string(bits))

    def convert_topology_to_bitvector(self, topology: Topology) -> list[bool]:
        """Return the bit vector describing the relations of ``topology``."""
        indices = {object_type: i for i, object_type in enumerate(self.all_object_types)}
        bits = [False] * self._num_relations
        for relation in topology.relations:
            try:
                index_a = indices[relation.object_type_a]
                index_b = indices[relation.object_type_b]
            except KeyError as exc:
                raise ValueError(f"unknown object type {exc.args[0]!r} in topology") from None
            if index_a == index_b:
                raise ValueError(f"relation of type {relation.object_type_a!r} with itself")
            bits[self._index(index_a, index_b)] = True
        return bits

    def calculate_neighbours(self, bits: Sequence[bool]) -> list[list[bool]]:
        """Return all bit vectors one removal, addition or swap away from ``bits``."""
        base = [bool(bit) for bit in bits]
        ones = [i for i, bit in enumerate(base) if bit]
        zeros = [i for i, bit in enumerate(base) if not bit]
        neighbours: list[list[bool]] = []

        if self.remove_relations:
            for one in ones:
                neighbour = base.copy()
                neighbour[one] = False
                neighbours.append(neighbour)

        for zero in zeros:
            neighbour = base.copy()
            neighbour[zero] = True
            neighbours.append(neighbour)
            if self.swap_relations:
                for one in ones:
                    neighbour = base.copy()
                    neighbour[zero] = True
                    neighbour[one] = False
                    neighbours.append(neighbour)

        return neighbours