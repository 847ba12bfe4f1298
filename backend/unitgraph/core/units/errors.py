"""Exceptions raised by the unit registry, resolver and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unitgraph.core.units.unit import Unit


class UnitsError(Exception):
    """Base class for recoverable unit errors."""


class UnitNotFoundError(UnitsError, LookupError):
    """Raised when a lookup string matches no registered unit."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f'unit "{query}" not found')


class NoConversionPathError(UnitsError):
    """Raised when the conversion graph has no path between two units."""

    def __init__(self, source: "Unit", target: "Unit") -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"no conversion path from '{source.name}' to '{target.name}'"
        )


class FatalRegistrationError(Exception):
    """Raised when static unit data is malformed.

    Only ever raised while a registry is being built; callers should let it
    stop startup. Not a UnitsError: handlers for recoverable errors must not
    catch it.
    """


class ConversionAbort(RuntimeError):
    """Raised by the fail-fast conversion helpers.

    Not a UnitsError: handlers for recoverable errors must not catch it.
    """
