"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cargofleet_app.models import ContainerShip, SerialNumberRegistry
from cargofleet_app.services import ContainerFactory


@pytest.fixture
def registry():
    """A fresh serial counter starting at 1."""
    return SerialNumberRegistry()


@pytest.fixture
def factory(registry):
    return ContainerFactory(registry)


@pytest.fixture
def sample_ship():
    """Ship rated at 40000 t and 100 containers."""
    return ContainerShip("Test Vessel", 10, 100, 40000)


@pytest.fixture
def small_ship():
    """Ship with room for two containers and 20 t."""
    return ContainerShip("Small Vessel", 8, 2, 20)


@pytest.fixture
def loaded_containers(factory):
    """Reefer, hazardous liquid and gas containers loaded as in the demo."""
    bananas = factory.refrigerated(200, 200, 500, 20000, 13.3, "Bananas")
    fuel = factory.liquid(200, 200, 600, 15000, True)
    gas = factory.gas(200, 200, 700, 10000, 10)
    bananas.load(15000)
    fuel.load(7500)
    gas.load(9000)
    return bananas, fuel, gas
