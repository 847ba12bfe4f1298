"""Volume flow rate units. Cubic meter per second is the base unit."""

from __future__ import annotations

from unitgraph.core.units.registry import UnitRegistry
from unitgraph.core.units.unit import SI, Quantity, Unit

VOLUME_FLOW_RATE = Quantity("volume flow rate")

# (time word, symbol suffix, ASCII suffix, seconds)
_PERIODS = [
    ("second", "s", "s-1", 1),
    ("minute", "min", "m-1", 60),
    ("hour", "h", "h-1", 3600),
    ("day", "d", "d-1", 86400),
]

# (prefix word, British spelling, symbol, ASCII symbol, cubic units per cubic meter)
_METRIC_VOLUMES = [
    ("meter", "metre", "m³", "m3", 1.0),
    ("decimeter", "decimetre", "dm³", "dm3", 1e3),
    ("centimeter", "centimetre", "cm³", "cm3", 1e6),
]

# 1 in = 0.0254 m, 1 ft = 0.3048 m, 1 yd = 0.9144 m
_IMPERIAL_VOLUMES = [
    ("inch", "in³", 1 / (0.0254 * 0.0254 * 0.0254)),  # ~61023.7441
    ("foot", "ft³", 1 / (0.3048 * 0.3048 * 0.3048)),  # ~35.314666721488
    ("yard", "yd³", 1 / (0.9144 * 0.9144 * 0.9144)),  # ~1.3079506193144
]


def define(registry: UnitRegistry) -> None:
    """Register every volume flow rate unit and the ratio conversions between them."""
    # units[volume word][period word]
    units: dict[str, dict[str, Unit]] = {}

    for word, british, symbol, ascii_symbol, _ratio in _METRIC_VOLUMES:
        units[word] = {
            period: registry.define_unit(
                f"cubic {word} per {period}",
                f"{symbol}/{suffix}",
                VOLUME_FLOW_RATE,
                aliases=[f"cubic {british} per {period}"],
                symbols=[f"{ascii_symbol}/{suffix}", f"{ascii_symbol}{ascii_suffix}"],
                system=SI,
            )
            for period, suffix, ascii_suffix, _seconds in _PERIODS
        }

    for word, symbol, _ratio in _IMPERIAL_VOLUMES:
        units[word] = {
            period: registry.define_unit(f"cubic {word} per {period}", f"{symbol}/{suffix}", VOLUME_FLOW_RATE)
            for period, suffix, _ascii_suffix, _seconds in _PERIODS
        }

    base = units["meter"]
    for period, _suffix, _ascii_suffix, seconds in _PERIODS[1:]:
        registry.define_ratio_conversion(base["second"], base[period], seconds)

    volumes = [(w, r) for w, _b, _s, _a, r in _METRIC_VOLUMES[1:]]
    volumes += [(w, r) for w, _s, r in _IMPERIAL_VOLUMES]
    for word, ratio in volumes:
        for period, _suffix, _ascii_suffix, _seconds in _PERIODS:
            registry.define_ratio_conversion(base[period], units[word][period], ratio)
