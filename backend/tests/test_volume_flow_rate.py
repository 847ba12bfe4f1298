"""Tests for the shipped volume flow rate definitions."""

import pytest

from unitgraph.core.units.errors import UnitNotFoundError
from unitgraph.core.units.registry import build_registry
from unitgraph.core.units.unit import SI
from unitgraph.core.units.validator import validate
from unitgraph.definitions import volume_flow_rate
from unitgraph.definitions.catalog import get_registry


@pytest.fixture(scope="module")
def registry():
    return build_registry(volume_flow_rate.define)


class TestDefinitions:
    def test_unit_count(self, registry):
        assert len(registry) == 24
        assert [q.name for q in registry.quantities()] == ["volume flow rate"]

    def test_validates_cleanly(self, registry):
        assert validate(registry) == []

    def test_metric_units_carry_si_and_ascii_symbols(self, registry):
        unit = registry.get("cubic meter per minute")
        assert unit.symbol == "m³/min"
        assert unit.aliases == ("cubic metre per minute",)
        assert unit.symbols == ("m3/min", "m3m-1")
        assert unit.system == SI

    def test_imperial_units_have_no_system(self, registry):
        unit = registry.get("cubic yard per day")
        assert unit.symbol == "yd³/d"
        assert unit.system is None

    def test_default_registry_includes_table(self):
        assert get_registry().find("m3/s").name == "cubic meter per second"


class TestConversions:
    def test_per_second_to_per_hour(self, registry):
        m3s = registry.get("cubic meter per second")
        m3h = registry.get("cubic meter per hour")
        assert registry.convert(1.0, m3s, m3h).magnitude == 3600.0

    def test_cubic_meter_to_cubic_foot(self, registry):
        m3s = registry.get("cubic meter per second")
        ft3s = registry.get("cubic foot per second")
        assert registry.convert(1.0, m3s, ft3s).magnitude == pytest.approx(35.3146667, rel=1e-8)

    def test_cubic_meter_to_cubic_inch(self, registry):
        m3d = registry.get("cubic meter per day")
        in3d = registry.get("cubic inch per day")
        assert registry.convert(1.0, m3d, in3d).magnitude == pytest.approx(61023.7441, rel=1e-9)

    def test_across_volume_and_time(self, registry):
        cm3min = registry.get("cubic centimeter per minute")
        dm3h = registry.get("cubic decimeter per hour")
        # 1 cm³/min = 60 cm³/h = 0.06 dm³/h
        assert registry.convert(1.0, cm3min, dm3h).magnitude == pytest.approx(0.06, rel=1e-12)

    def test_every_pair_resolves(self, registry):
        units = registry.all()
        for source in units:
            for target in units:
                registry.resolve(source, target)

    def test_round_trip_every_edge(self, registry):
        for edge in registry.graph.edges():
            there = registry.convert(42.0, edge.source, edge.target).magnitude
            back = registry.convert(there, edge.target, edge.source).magnitude
            assert back == pytest.approx(42.0, rel=1e-9)

    def test_transitivity(self, registry):
        a = registry.get("cubic foot per minute")
        b = registry.get("cubic meter per second")
        c = registry.get("cubic yard per day")
        direct = registry.convert(5.0, a, c).magnitude
        stepped = registry.convert(registry.convert(5.0, a, b).magnitude, b, c).magnitude
        assert direct == pytest.approx(stepped, rel=1e-9)


class TestLookup:
    def test_ascii_symbol(self, registry):
        assert registry.find("m3/s").name == "cubic meter per second"

    def test_british_alias(self, registry):
        assert registry.find("cubic metre per second").name == "cubic meter per second"

    def test_unicode_symbol(self, registry):
        assert registry.find("ft³/h").name == "cubic foot per hour"

    def test_case_insensitive_name(self, registry):
        assert registry.find("Cubic Inch Per Minute").name == "cubic inch per minute"

    def test_paraphrase_not_found(self, registry):
        with pytest.raises(UnitNotFoundError):
            registry.find("cubic metres per second")
