"""Quantity and Unit records."""

from __future__ import annotations

from dataclasses import dataclass, field

from unitgraph.core.units.errors import FatalRegistrationError

SI = "SI"


@dataclass(frozen=True)
class Quantity:
    """A physical dimension such as 'volume flow rate'. Identity is the name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Unit:
    """One measurement unit.

    Units compare by identity: two units with identical fields are still
    different units unless they are the same registered instance. Fields are
    read-only; ``id`` is the unit's slot in its registry, -1 until the
    registry binds it, and can be bound only once.
    """

    name: str
    symbol: str
    quantity: Quantity
    aliases: tuple[str, ...] = ()
    symbols: tuple[str, ...] = ()
    system: str | None = None
    _id: int = field(default=-1, init=False, repr=False)

    @property
    def id(self) -> int:
        return self._id

    @property
    def registered(self) -> bool:
        return self._id >= 0

    def bind(self, unit_id: int) -> None:
        """Record the registry slot of this unit. Called by the registry only."""
        if self.registered:
            raise FatalRegistrationError(f"Unit '{self.name}' is already registered")
        object.__setattr__(self, "_id", unit_id)

    def names(self) -> list[str]:
        """Every string this unit can be matched by, name first."""
        names = [self.name]
        if self.symbol:
            names.append(self.symbol)
        names.extend(a for a in self.aliases if a)
        names.extend(s for s in self.symbols if s)
        return names

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, {self.symbol!r}, quantity={self.quantity.name!r})"

    def __str__(self) -> str:
        return self.name
