"""Tests for the conversion graph and edge registration."""

import pytest

from unitgraph.core.units.errors import FatalRegistrationError
from unitgraph.core.units.registry import UnitRegistry
from unitgraph.core.units.unit import Quantity, Unit

LENGTH = Quantity("length")


def _registry_with(*names):
    registry = UnitRegistry()
    units = [registry.define_unit(n, n[0], LENGTH) for n in names]
    return registry, units


class TestAddEdge:
    def test_neighbors_in_registration_order(self):
        registry, (a, b, c) = _registry_with("alpha", "beta", "gamma")
        graph = registry.graph
        graph.add_edge(a, c, lambda x: x * 3)
        graph.add_edge(a, b, lambda x: x * 2)
        targets = [e.target for e in graph.neighbors(a)]
        assert targets == [c, b]

    def test_edge_applies_fn(self):
        registry, (a, b) = _registry_with("alpha", "beta")
        edge = registry.graph.add_edge(a, b, lambda x: x + 1)
        assert edge(1.5) == 2.5
        assert edge.ratio is None

    def test_duplicate_pair_rejected(self):
        registry, (a, b) = _registry_with("alpha", "beta")
        registry.graph.add_edge(a, b, lambda x: x)
        with pytest.raises(FatalRegistrationError, match="already registered"):
            registry.graph.add_edge(a, b, lambda x: x * 2)
        assert len(registry.graph.neighbors(a)) == 1

    def test_self_edge_rejected(self):
        registry, (a,) = _registry_with("alpha")
        with pytest.raises(FatalRegistrationError):
            registry.graph.add_edge(a, a, lambda x: x)

    def test_unregistered_unit_rejected(self):
        registry, (a,) = _registry_with("alpha")
        stray = Unit("stray", "s", LENGTH)
        with pytest.raises(FatalRegistrationError, match="not registered"):
            registry.graph.add_edge(a, stray, lambda x: x)

    def test_unit_from_other_registry_rejected(self):
        registry, (a,) = _registry_with("alpha")
        _other, (foreign,) = _registry_with("beta")
        assert foreign.id == a.id
        with pytest.raises(FatalRegistrationError):
            registry.graph.add_edge(a, foreign, lambda x: x)

    def test_none_unit_rejected(self):
        registry, (a,) = _registry_with("alpha")
        with pytest.raises(FatalRegistrationError):
            registry.graph.add_edge(a, None, lambda x: x)

    def test_cycles_allowed(self):
        registry, (a, b, c) = _registry_with("alpha", "beta", "gamma")
        registry.define_ratio_conversion(a, b, 2)
        registry.define_ratio_conversion(b, c, 3)
        registry.define_ratio_conversion(c, a, 1 / 6)
        assert registry.graph.edge_count == 6


class TestRatioConversion:
    def test_registers_both_directions(self):
        registry, (a, b) = _registry_with("alpha", "beta")
        registry.define_ratio_conversion(a, b, 4.0)
        (forward,) = registry.graph.neighbors(a)
        (backward,) = registry.graph.neighbors(b)
        assert forward(2.0) == 8.0
        assert backward(8.0) == 2.0
        assert forward.ratio == 4.0
        assert backward.ratio == 0.25

    def test_atomic_when_inverse_exists(self):
        registry, (a, b) = _registry_with("alpha", "beta")
        registry.graph.add_edge(b, a, lambda x: x / 4)
        with pytest.raises(FatalRegistrationError):
            registry.define_ratio_conversion(a, b, 4.0)
        assert registry.graph.neighbors(a) == ()
        assert registry.graph.edge_count == 1

    @pytest.mark.parametrize("ratio", [0, float("nan"), float("inf"), "3"])
    def test_invalid_ratio(self, ratio):
        registry, (a, b) = _registry_with("alpha", "beta")
        with pytest.raises(FatalRegistrationError, match="Invalid ratio"):
            registry.define_ratio_conversion(a, b, ratio)
        assert registry.graph.edge_count == 0

    def test_missing_unit(self):
        registry, (a,) = _registry_with("alpha")
        with pytest.raises(FatalRegistrationError):
            registry.define_ratio_conversion(a, None, 2.0)
        assert registry.graph.edge_count == 0


class TestFunctionConversion:
    def test_registers_fn_and_inverse(self):
        temperature = Quantity("temperature")
        registry = UnitRegistry()
        c = registry.define_unit("celsius", "°C", temperature)
        k = registry.define_unit("kelvin", "K", temperature)
        registry.define_conversion(c, k, lambda x: x + 273.15, lambda x: x - 273.15)
        assert registry.convert(0.0, c, k).magnitude == 273.15
        assert registry.convert(273.15, k, c).magnitude == 0.0

    def test_requires_callables(self):
        registry, (a, b) = _registry_with("alpha", "beta")
        with pytest.raises(FatalRegistrationError):
            registry.define_conversion(a, b, lambda x: x, None)
        assert registry.graph.edge_count == 0
