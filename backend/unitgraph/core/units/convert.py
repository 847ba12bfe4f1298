"""Compose resolved conversion paths and apply them to values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Sequence

from unitgraph.core.units.errors import ConversionAbort, NoConversionPathError
from unitgraph.core.units.graph import ConversionEdge, ConversionGraph, Transform
from unitgraph.core.units.resolver import resolve
from unitgraph.core.units.unit import Unit


@dataclass(frozen=True)
class Value:
    """A magnitude expressed in a unit."""

    magnitude: float
    unit: Unit

    def __float__(self) -> float:
        return self.magnitude


def compose(path: Sequence[ConversionEdge]) -> Transform:
    """Fold a path into one function applying each edge in order."""
    steps = tuple(edge.fn for edge in path)

    def apply(x: float) -> float:
        return reduce(lambda acc, fn: fn(acc), steps, x)

    return apply


def convert(graph: ConversionGraph, x: float, source: Unit, target: Unit) -> Value:
    """Convert ``x`` from ``source`` to ``target``.

    Raises:
        NoConversionPathError: the units are not connected.
    """
    return trace(graph, x, source, target)[1]


def trace(
    graph: ConversionGraph,
    x: float,
    source: Unit,
    target: Unit,
) -> tuple[list[ConversionEdge], Value]:
    """Convert ``x`` and also return the edges the conversion went through."""
    path = resolve(graph, source, target)
    return path, Value(compose(path)(float(x)), target)


def convert_or_abort(graph: ConversionGraph, x: float, source: Unit, target: Unit) -> Value:
    """Like :func:`convert`, for callers that already validated the units.

    A missing path is treated as a programming error and raised as
    :class:`ConversionAbort`.
    """
    try:
        return convert(graph, x, source, target)
    except NoConversionPathError as exc:
        raise ConversionAbort(str(exc)) from exc
