"""Consistency checks for a populated unit registry.

These catch data-definition bugs (colliding names, quantities whose units
cannot all reach each other) at build or test time rather than as wrong
answers at conversion time.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from unitgraph.core.units.unit import Quantity, Unit

if TYPE_CHECKING:
    from unitgraph.core.units.registry import UnitRegistry


class ValidationSeverity(Enum):
    ERROR = auto()    # registry must not be used
    WARNING = auto()  # suspicious but convertible


@dataclass
class RegistryIssue:
    severity: ValidationSeverity
    code: str
    message: str


def validate(registry: UnitRegistry) -> list[RegistryIssue]:
    """Run all checks. Returns list of issues (empty = valid)."""
    issues: list[RegistryIssue] = []
    issues.extend(_check_duplicate_names(registry))
    issues.extend(_check_edges(registry))
    for quantity in registry.quantities():
        issue = _check_connected(registry, quantity)
        if issue is not None:
            issues.append(issue)
    return issues


def _check_duplicate_names(registry: UnitRegistry) -> list[RegistryIssue]:
    issues: list[RegistryIssue] = []
    owners: dict[str, Unit] = {}
    for unit in registry.all():
        for name in dict.fromkeys(unit.names()):
            other = owners.get(name)
            if other is None:
                owners[name] = unit
            elif other is not unit:
                issues.append(RegistryIssue(
                    ValidationSeverity.ERROR,
                    "DUPLICATE_NAME",
                    f"'{name}' names both '{other.name}' and '{unit.name}'",
                ))
    return issues


def _check_edges(registry: UnitRegistry) -> list[RegistryIssue]:
    issues: list[RegistryIssue] = []
    graph = registry.graph
    for edge in graph.edges():
        if edge.source.quantity != edge.target.quantity:
            issues.append(RegistryIssue(
                ValidationSeverity.WARNING,
                "CROSS_QUANTITY_EDGE",
                f"Conversion '{edge.source.name}' -> '{edge.target.name}' joins "
                f"'{edge.source.quantity}' and '{edge.target.quantity}'",
            ))
        if not graph.has_edge(edge.target, edge.source):
            issues.append(RegistryIssue(
                ValidationSeverity.WARNING,
                "MISSING_INVERSE",
                f"Conversion '{edge.source.name}' -> '{edge.target.name}' has no inverse",
            ))
    return issues


def _check_connected(registry: UnitRegistry, quantity: Quantity) -> RegistryIssue | None:
    """Every unit of ``quantity`` must reach, and be reached from, every other."""
    units = registry.units_for(quantity)
    if len(units) < 2:
        return None

    forward: dict[int, list[int]] = {u.id: [] for u in units}
    backward: dict[int, list[int]] = {u.id: [] for u in units}
    for unit in units:
        for edge in registry.graph.neighbors(unit):
            if edge.target.quantity == quantity:
                forward[unit.id].append(edge.target.id)
                backward[edge.target.id].append(unit.id)

    root = units[0]
    unreachable = set(forward) - _reach(forward, root.id)
    unreturning = set(backward) - _reach(backward, root.id)
    stranded = unreachable | unreturning
    if not stranded:
        return None

    names = sorted(u.name for u in units if u.id in stranded)
    return RegistryIssue(
        ValidationSeverity.ERROR,
        "DISCONNECTED_QUANTITY",
        f"Quantity '{quantity}' is not connected: {', '.join(names)} "
        f"cannot convert both ways with '{root.name}'",
    )


def _reach(adjacency: dict[int, list[int]], start: int) -> set[int]:
    seen = {start}
    queue: deque[int] = deque([start])
    while queue:
        for nxt in adjacency[queue.popleft()]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen
