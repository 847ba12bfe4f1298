"""Conversion graph: units are nodes, elementary conversions are directed edges.

Nodes live in an arena indexed by ``Unit.id``; each node keeps its outgoing
edges in registration order. Edges are only ever added.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from unitgraph.core.units.errors import FatalRegistrationError
from unitgraph.core.units.unit import Unit

Transform = Callable[[float], float]


@dataclass(frozen=True)
class ConversionEdge:
    source: Unit
    target: Unit
    fn: Transform
    ratio: float | None = None  # set for ratio edges only

    def __call__(self, x: float) -> float:
        return self.fn(x)


def _multiply(ratio: float) -> Transform:
    return lambda x: x * ratio


def _divide(ratio: float) -> Transform:
    return lambda x: x / ratio


class ConversionGraph:
    """Directed graph without parallel edges, keyed by unit id."""

    def __init__(self) -> None:
        self._nodes: list[Unit] = []
        self._adjacency: list[list[ConversionEdge]] = []
        self._pairs: set[tuple[int, int]] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._pairs)

    # ── Nodes ────────────────────────────────────────────────────────────

    def add_node(self, unit: Unit) -> None:
        """Give a freshly registered unit its adjacency slot."""
        if unit.id != len(self._nodes):
            raise FatalRegistrationError(
                f"Unit '{unit.name}' has id {unit.id}, expected {len(self._nodes)}"
            )
        self._nodes.append(unit)
        self._adjacency.append([])

    def contains(self, unit: Unit) -> bool:
        return 0 <= unit.id < len(self._nodes) and self._nodes[unit.id] is unit

    # ── Edges ────────────────────────────────────────────────────────────

    def add_edge(
        self,
        source: Unit,
        target: Unit,
        fn: Transform,
        ratio: float | None = None,
    ) -> ConversionEdge:
        """Insert one directed edge. Rejects unknown units and repeated pairs."""
        self._check_pair(source, target)
        edge = ConversionEdge(source, target, fn, ratio)
        self._adjacency[source.id].append(edge)
        self._pairs.add((source.id, target.id))
        return edge

    def has_edge(self, source: Unit, target: Unit) -> bool:
        return (
            (source.id, target.id) in self._pairs
            and self.contains(source)
            and self.contains(target)
        )

    def neighbors(self, unit: Unit) -> tuple[ConversionEdge, ...]:
        """Outgoing edges of ``unit`` in registration order."""
        if not self.contains(unit):
            return ()
        return tuple(self._adjacency[unit.id])

    def edges(self) -> list[ConversionEdge]:
        """All edges, grouped by source id, each group in registration order."""
        return [edge for out in self._adjacency for edge in out]

    def new_ratio_conversion(self, a: Unit, b: Unit, ratio: float) -> None:
        """Register ``a -> b`` as ``x * ratio`` and ``b -> a`` as ``x / ratio``.

        Both edges are checked before either is inserted.
        """
        if not isinstance(ratio, (int, float)) or not math.isfinite(ratio) or ratio == 0:
            raise FatalRegistrationError(
                f"Invalid ratio {ratio!r} for '{_name(a)}' -> '{_name(b)}'"
            )
        self._check_pair(a, b)
        self._check_pair(b, a)
        ratio = float(ratio)
        self.add_edge(a, b, _multiply(ratio), ratio)
        self.add_edge(b, a, _divide(ratio), 1.0 / ratio)

    def new_conversion(self, a: Unit, b: Unit, fn: Transform, inverse: Transform) -> None:
        """Register an arbitrary forward/inverse function pair between two units."""
        if not callable(fn) or not callable(inverse):
            raise FatalRegistrationError(
                f"Conversion '{_name(a)}' <-> '{_name(b)}' needs two callables"
            )
        self._check_pair(a, b)
        self._check_pair(b, a)
        self.add_edge(a, b, fn)
        self.add_edge(b, a, inverse)

    def _check_pair(self, source: Unit, target: Unit) -> None:
        for unit in (source, target):
            if unit is None or not isinstance(unit, Unit):
                raise FatalRegistrationError(f"Conversion endpoint must be a Unit, got {unit!r}")
            if not self.contains(unit):
                raise FatalRegistrationError(f"Unit '{unit.name}' is not registered in this graph")
        if source is target:
            raise FatalRegistrationError(f"Conversion from '{source.name}' to itself")
        if (source.id, target.id) in self._pairs:
            raise FatalRegistrationError(
                f"Conversion '{source.name}' -> '{target.name}' is already registered"
            )


def _name(unit: object) -> str:
    return getattr(unit, "name", repr(unit))
