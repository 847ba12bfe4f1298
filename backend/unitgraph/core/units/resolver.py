"""Shortest conversion path between two units.

Breadth-first search keeps the number of composed edges minimal, which also
keeps the number of floating-point rounding steps minimal. Edges are explored
in registration order, so ties between equally short paths always resolve the
same way for the same registry.
"""

from __future__ import annotations

from collections import deque

from unitgraph.core.logging import get_logger
from unitgraph.core.units.errors import NoConversionPathError
from unitgraph.core.units.graph import ConversionEdge, ConversionGraph
from unitgraph.core.units.unit import Unit

logger = get_logger(__name__)


def resolve(graph: ConversionGraph, source: Unit, target: Unit) -> list[ConversionEdge]:
    """Return the edges of a shortest path from ``source`` to ``target``.

    Raises:
        NoConversionPathError: ``target`` is unreachable from ``source``.
    """
    if source is target:
        return []

    if not (graph.contains(source) and graph.contains(target)):
        raise NoConversionPathError(source, target)

    # Mark on enqueue: every unit enters the queue at most once.
    visited = bytearray(len(graph))
    via: dict[int, ConversionEdge] = {}
    visited[source.id] = 1
    queue: deque[Unit] = deque([source])

    while queue:
        current = queue.popleft()
        for edge in graph.neighbors(current):
            nxt = edge.target
            if visited[nxt.id]:
                continue
            via[nxt.id] = edge
            if nxt is target:
                path = _reconstruct_path(via, source, target)
                logger.debug(
                    "conversion_path_resolved",
                    source=source.name,
                    target=target.name,
                    steps=len(path),
                )
                return path
            visited[nxt.id] = 1
            queue.append(nxt)

    logger.debug("conversion_path_missing", source=source.name, target=target.name)
    raise NoConversionPathError(source, target)


def _reconstruct_path(
    via: dict[int, ConversionEdge],
    source: Unit,
    target: Unit,
) -> list[ConversionEdge]:
    path: list[ConversionEdge] = []
    current = target
    while current is not source:
        edge = via[current.id]
        path.append(edge)
        current = edge.source
    path.reverse()
    return path
