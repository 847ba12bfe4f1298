"""Unit registry: owns the units and the conversion graph between them.

Lifecycle:
    registry = build_registry(volume_flow_rate.define)
    m3s = registry.find("m3/s")
    registry.convert(1.0, m3s, registry.get("cubic meter per hour"))

A registry is populated by definition functions, validated, then frozen.
Once frozen it is never mutated, so concurrent readers need no locking.
"""

from __future__ import annotations

from typing import Callable, Iterable

from unitgraph.core.logging import get_logger
from unitgraph.core.units import lookup
from unitgraph.core.units.convert import Value, convert, convert_or_abort, trace
from unitgraph.core.units.errors import FatalRegistrationError, UnitNotFoundError
from unitgraph.core.units.graph import ConversionEdge, ConversionGraph, Transform
from unitgraph.core.units.resolver import resolve
from unitgraph.core.units.unit import Quantity, Unit
from unitgraph.core.units.validator import ValidationSeverity, validate as validate_registry

logger = get_logger(__name__)

Definer = Callable[["UnitRegistry"], object]


class UnitRegistry:
    """Arena of units indexed by id, plus the conversion graph over them."""

    def __init__(self) -> None:
        self._units: list[Unit] = []
        self._by_name: dict[str, Unit] = {}
        self._sorted: tuple[Unit, ...] | None = None
        self._frozen = False
        self.graph = ConversionGraph()

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, Unit) and self.graph.contains(unit)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Registration ─────────────────────────────────────────────────────

    def register(self, unit: Unit) -> Unit:
        """Add ``unit`` to the registry and assign its id."""
        self._ensure_writable()
        if unit.registered:
            raise FatalRegistrationError(f"Unit '{unit.name}' is already registered")
        if not unit.name or not unit.name.strip():
            raise FatalRegistrationError("Unit name must not be empty")
        if unit.name in self._by_name:
            raise FatalRegistrationError(f"Duplicate unit name '{unit.name}'")

        unit.bind(len(self._units))
        self._units.append(unit)
        self._by_name[unit.name] = unit
        self.graph.add_node(unit)
        self._sorted = None
        return unit

    def define_unit(
        self,
        name: str,
        symbol: str,
        quantity: Quantity,
        *,
        aliases: Iterable[str] = (),
        symbols: Iterable[str] = (),
        system: str | None = None,
    ) -> Unit:
        """Create a unit and register it."""
        return self.register(Unit(
            name=name,
            symbol=symbol,
            quantity=quantity,
            aliases=tuple(aliases),
            symbols=tuple(symbols),
            system=system,
        ))

    def define_ratio_conversion(self, a: Unit, b: Unit, ratio: float) -> None:
        """1 ``a`` equals ``ratio`` ``b``; registers both directions."""
        self._ensure_writable()
        self.graph.new_ratio_conversion(a, b, ratio)

    def define_conversion(self, a: Unit, b: Unit, fn: Transform, inverse: Transform) -> None:
        """Register a non-ratio conversion given its forward and inverse functions."""
        self._ensure_writable()
        self.graph.new_conversion(a, b, fn, inverse)

    def freeze(self) -> None:
        self._frozen = True
        self.all()

    def _ensure_writable(self) -> None:
        if self._frozen:
            raise FatalRegistrationError("Registry is frozen; register units before freezing")

    # ── Queries ──────────────────────────────────────────────────────────

    def all(self) -> tuple[Unit, ...]:
        """Every unit, ordered by (quantity name, unit name)."""
        if self._sorted is None:
            self._sorted = tuple(sorted(self._units, key=lambda u: (u.quantity.name, u.name)))
        return self._sorted

    def get(self, name: str) -> Unit:
        """Exact lookup by canonical name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnitNotFoundError(name) from None

    def units_for(self, quantity: Quantity) -> list[Unit]:
        return [u for u in self.all() if u.quantity == quantity]

    def quantities(self) -> list[Quantity]:
        return sorted({u.quantity for u in self._units}, key=lambda q: q.name)

    def find(self, s: str) -> Unit:
        return lookup.find(self.all(), s)

    # ── Conversion ───────────────────────────────────────────────────────

    def resolve(self, source: Unit, target: Unit) -> list[ConversionEdge]:
        return resolve(self.graph, source, target)

    def convert(self, x: float, source: Unit, target: Unit) -> Value:
        return convert(self.graph, x, source, target)

    def trace(self, x: float, source: Unit, target: Unit) -> tuple[list[ConversionEdge], Value]:
        return trace(self.graph, x, source, target)

    def convert_or_abort(self, x: float, source: Unit, target: Unit) -> Value:
        return convert_or_abort(self.graph, x, source, target)


def build_registry(*definers: Definer, validate: bool = True) -> UnitRegistry:
    """Run each definer against a fresh registry, check it, and freeze it.

    Raises:
        FatalRegistrationError: a definer registered malformed data, or
            ``validate`` is set and the registry has error-level issues.
    """
    registry = UnitRegistry()
    for define in definers:
        define(registry)

    if validate:
        issues = validate_registry(registry)
        for issue in issues:
            if issue.severity == ValidationSeverity.WARNING:
                logger.warning("unit_registry_issue", code=issue.code, message=issue.message)
        errors = [i for i in issues if i.severity == ValidationSeverity.ERROR]
        if errors:
            raise FatalRegistrationError(
                "Invalid unit data:\n" + "\n".join(f"  [{e.code}] {e.message}" for e in errors)
            )

    registry.freeze()
    logger.info(
        "unit_registry_built",
        units=len(registry),
        edges=registry.graph.edge_count,
        quantities=len(registry.quantities()),
    )
    return registry
