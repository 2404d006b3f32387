"""
Domain models for the cargofleet app.

These are pure in-memory classes; capacity rules live on the models themselves.
"""

from .container import (
    Container,
    ContainerKind,
    GasContainer,
    HazardNotice,
    LiquidContainer,
    LoadResult,
    RefrigeratedContainer,
)
from .errors import (
    CapacityExceededError,
    CargoError,
    ContainerNotFoundError,
    InvalidArgumentError,
    ShipNotFoundError,
)
from .serials import SerialNumberRegistry, default_registry
from .ship import ContainerShip

__all__ = [
    "Container",
    "ContainerKind",
    "GasContainer",
    "HazardNotice",
    "LiquidContainer",
    "LoadResult",
    "RefrigeratedContainer",
    "CapacityExceededError",
    "CargoError",
    "ContainerNotFoundError",
    "InvalidArgumentError",
    "ShipNotFoundError",
    "SerialNumberRegistry",
    "default_registry",
    "ContainerShip",
]
