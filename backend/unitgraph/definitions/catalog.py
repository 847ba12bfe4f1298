"""The process-wide default registry."""

from __future__ import annotations

from functools import lru_cache

from unitgraph.config import settings
from unitgraph.core.units.registry import Definer, UnitRegistry, build_registry
from unitgraph.definitions import volume_flow_rate

DEFAULT_DEFINITIONS: tuple[Definer, ...] = (
    volume_flow_rate.define,
)


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return the frozen default registry, building it on first use."""
    return build_registry(*DEFAULT_DEFINITIONS, validate=settings.validate_registry)
