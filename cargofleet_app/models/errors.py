"""
Errors raised by the container and ship capacity rules.

All of them are recoverable by the caller; hazard notices are not errors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class CargoError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class InvalidArgumentError(CargoError):
    """Negative amounts, over-unloading, sub-floor unloading, low temperature."""


@dataclass(eq=False)
class CapacityExceededError(CargoError):
    """A container mass ceiling or a ship count/weight ceiling would be exceeded."""

    kind: str = "load"  # "load" (container), "count" or "weight" (ship)
    limit: float | None = None
    attempted: float | None = None


@dataclass(eq=False)
class ContainerNotFoundError(CargoError):
    serial_number: str = ""


@dataclass(eq=False)
class ShipNotFoundError(CargoError):
    name: str = ""
