"""Tests for container load/unload rules."""

from __future__ import annotations

import pytest

from cargofleet_app.models import (
    CapacityExceededError,
    Container,
    ContainerKind,
    InvalidArgumentError,
)


class TestBaseLoadUnload:
    def test_new_container_is_empty(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        assert c.current_load == 0.0
        assert c.gross_weight == 500.0
        assert c.free_capacity == 20000.0

    def test_load_and_unload(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        res = c.load(15000)
        assert res.current_load == 15000.0
        assert not res.has_notices
        c.unload(5000)
        assert c.current_load == 10000.0

    def test_load_up_to_max_is_allowed(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        c.load(20000)
        assert c.current_load == c.max_load

    def test_load_negative_rejected(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        with pytest.raises(InvalidArgumentError):
            c.load(-1)
        assert c.current_load == 0.0

    def test_load_over_max_rejected_state_unchanged(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        c.load(15000)
        with pytest.raises(CapacityExceededError) as exc_info:
            c.load(5001)
        assert exc_info.value.kind == "load"
        assert exc_info.value.limit == 20000
        assert exc_info.value.attempted == 20001
        assert c.current_load == 15000.0

    def test_unload_negative_rejected(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        c.load(100)
        with pytest.raises(InvalidArgumentError):
            c.unload(-1)

    def test_unload_more_than_loaded_rejected(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        c.load(100)
        with pytest.raises(InvalidArgumentError):
            c.unload(101)
        assert c.current_load == 100.0

    @pytest.mark.parametrize("amount", [0.0, 1.0, 2500.0, 20000.0])
    def test_load_then_unload_restores_load(self, factory, amount):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
        before = c.current_load
        c.load(amount)
        c.unload(amount)
        assert c.current_load == before

    def test_bounds_hold_after_mixed_sequence(self, factory):
        c = factory.refrigerated(200, 200, 500, 1000, 5.0, "Fish")
        for op, amount in [("load", 600), ("load", 500), ("unload", 700), ("unload", 100), ("load", 900)]:
            try:
                getattr(c, op)(amount)
            except (CapacityExceededError, InvalidArgumentError):
                pass
            assert 0.0 <= c.current_load <= c.max_load

    def test_display_info(self, factory):
        c = factory.refrigerated(200, 250, 500, 20000, 13.3, "Bananas")
        c.load(1500)
        info = c.display_info()
        assert info.startswith("Container KON-C-1:")
        assert "depth=250.0cm" in info
        assert "current load=1500.0kg" in info
        assert "product=Bananas" in info


class TestRefrigerated:
    def test_kind(self, factory):
        assert factory.refrigerated(1, 1, 1, 1, 0.0, "X").kind is ContainerKind.REFRIGERATED

    def test_temperature_ok(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 13.3, "Bananas")
        c.validate_temperature(13.3)
        c.validate_temperature(10.0)

    def test_temperature_too_low(self, factory):
        c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Bananas")
        with pytest.raises(InvalidArgumentError):
            c.validate_temperature(13.3)


class TestLiquid:
    def test_effective_limits(self, factory):
        assert factory.liquid(200, 200, 600, 15000, True).effective_limit == 7500
        assert factory.liquid(200, 200, 600, 10000, False).effective_limit == 9000

    def test_below_limit_is_silent(self, factory):
        c = factory.liquid(200, 200, 600, 15000, True)
        received = []
        res = c.load(7500, notify=received.append)
        assert not res.has_notices
        assert received == []

    def test_hazardous_warns_but_accepts(self, factory, caplog):
        c = factory.liquid(200, 200, 600, 15000, True)
        received = []
        with caplog.at_level("WARNING"):
            res = c.load(7501, notify=received.append)
        assert c.current_load == 7501
        assert res.has_notices
        assert res.notices[0].limit == 7500
        assert res.notices[0].value == 7501
        assert received == res.notices
        assert "DANGER" in caplog.text

    def test_hazardous_over_max_warns_then_rejects(self, factory):
        c = factory.liquid(200, 200, 600, 15000, True)
        c.load(7501)
        received = []
        with pytest.raises(CapacityExceededError):
            c.load(7500, notify=received.append)
        assert len(received) == 1
        assert c.current_load == 7501

    def test_non_hazardous_threshold(self, factory):
        c = factory.liquid(200, 200, 600, 10000, False)
        assert not c.load(9000).has_notices
        assert c.load(1).has_notices

    def test_negative_load_rejected_without_notice(self, factory):
        c = factory.liquid(200, 200, 600, 15000, True)
        received = []
        with pytest.raises(InvalidArgumentError):
            c.load(-5, notify=received.append)
        assert received == []

    def test_notify_danger_does_not_change_state(self, factory):
        c = factory.liquid(200, 200, 600, 15000, False)
        notice = c.notify_danger("leak")
        assert notice.serial_number == c.serial_number
        assert notice.message == "leak"
        assert c.current_load == 0.0


class TestGas:
    def test_unload_below_floor_rejected(self, factory):
        c = factory.gas(200, 200, 700, 10000, 10)
        c.load(9000)
        with pytest.raises(InvalidArgumentError):
            c.unload(8550)
        assert c.current_load == 9000

    def test_unload_to_exact_floor_allowed(self, factory):
        c = factory.gas(200, 200, 700, 10000, 10)
        c.load(9000)
        c.unload(8500)
        assert c.current_load == 500

    def test_minimum_load(self, factory):
        assert factory.gas(200, 200, 700, 10000, 10).minimum_load == 500

    def test_load_uses_base_policy(self, factory):
        c = factory.gas(200, 200, 700, 10000, 10)
        with pytest.raises(CapacityExceededError):
            c.load(10001)

    def test_notify_danger(self, factory):
        c = factory.gas(200, 200, 700, 10000, 10)
        received = []
        c.notify_danger("pressure spike", notify=received.append)
        assert received[0].message == "pressure spike"


class TestAbstractBase:
    def test_base_container_cannot_be_built(self):
        with pytest.raises(TypeError):
            Container("KON-X-1", 200, 200, 500, 1000)

    def test_variants_can_be_built(self, factory):
        assert isinstance(factory.gas(200, 200, 700, 10000, 10), Container)


def test_base_load_ignores_notify(factory):
    c = factory.refrigerated(200, 200, 500, 20000, 5.0, "Fish")
    received = []
    res = c.load(20000, notify=received.append)
    assert received == []
    assert not res.has_notices
