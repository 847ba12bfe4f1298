"""Resolve a user-supplied string to a unit."""

from __future__ import annotations

from typing import Sequence

from unitgraph.core.units.errors import UnitNotFoundError
from unitgraph.core.units.unit import Unit


def find(units: Sequence[Unit], s: str) -> Unit:
    """Find the unit named ``s`` by name, symbol or alias.

    Three passes over ``units``, first hit wins: exact match, case-insensitive
    match, then case-insensitive match with one trailing ``s``/``S`` removed.
    Ordering of ``units`` decides ties, so pass a deterministic sequence.

    Raises:
        UnitNotFoundError: no pass matched; carries the original ``s``.
    """
    for unit in units:
        if _match(s, unit, match_case=True):
            return unit

    for unit in units:
        if _match(s, unit, match_case=False):
            return unit

    if s.endswith(("s", "S")):
        singular = s[:-1]
        for unit in units:
            if _match(singular, unit, match_case=False):
                return unit

    raise UnitNotFoundError(s)


def _match(s: str, unit: Unit, match_case: bool) -> bool:
    if match_case:
        return s in unit.names()
    folded = s.casefold()
    return any(name.casefold() == folded for name in unit.names())
