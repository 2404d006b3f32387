"""
Container models and their load/unload capacity rules.

Each concrete container kind carries its own type code (used in the serial
number) and may tighten the base load/unload policy:

- Refrigerated: base policy, plus a temperature check.
- Liquid: warns above an effective limit (50% hazardous, 90% otherwise)
  before applying the hard max-load ceiling.
- Gas: refuses any unload that would leave less than 5% of max load.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, List, Optional

from ..config.limits import (
    GAS_MIN_REMAINING_FRACTION,
    HAZARDOUS_LOAD_FRACTION,
    SAFE_LOAD_FRACTION,
)
from .errors import CapacityExceededError, InvalidArgumentError

logger = logging.getLogger(__name__)


class ContainerKind(Enum):
    REFRIGERATED = "C"
    LIQUID = "L"
    GAS = "G"


@dataclass(slots=True)
class HazardNotice:
    """Advisory signal raised when a load approaches an unsafe threshold."""

    serial_number: str
    message: str
    value: float | None = None
    limit: float | None = None


HazardCallback = Callable[[HazardNotice], None]


@dataclass(slots=True)
class LoadResult:
    serial_number: str
    amount: float
    current_load: float
    notices: List[HazardNotice] = field(default_factory=list)

    @property
    def has_notices(self) -> bool:
        return bool(self.notices)


@dataclass
class Container:
    """
    Base capacity-tracking container. Masses in kg, dimensions in cm.

    Use a concrete kind (RefrigeratedContainer, LiquidContainer, GasContainer);
    serial numbers are issued by ContainerFactory.
    """

    kind: ClassVar[ContainerKind]

    serial_number: str
    height: float
    depth: float
    tare_weight: float
    max_load: float
    current_load: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if type(self) is Container:
            raise TypeError(
                "Container is abstract; build a RefrigeratedContainer, LiquidContainer or GasContainer."
            )

    @property
    def gross_weight(self) -> float:
        return self.tare_weight + self.current_load

    @property
    def free_capacity(self) -> float:
        return self.max_load - self.current_load

    def load(self, amount: float, notify: Optional[HazardCallback] = None) -> LoadResult:
        """
        Add cargo (kg) up to max_load.

        notify is accepted so every kind shares one load signature; only kinds
        that raise hazard notices call it.
        """
        if amount < 0:
            raise InvalidArgumentError("Cargo weight cannot be negative.")
        attempted = self.current_load + amount
        if attempted > self.max_load:
            raise CapacityExceededError(
                f"Container max load exceeded. Maximum: {self.max_load} kg, "
                f"attempted: {attempted} kg.",
                kind="load",
                limit=self.max_load,
                attempted=attempted,
            )

        self.current_load = attempted
        logger.info(
            "Loaded %s kg into container %s. Current load: %s kg.",
            amount, self.serial_number, self.current_load,
        )
        return LoadResult(self.serial_number, amount, self.current_load)

    def unload(self, amount: float) -> LoadResult:
        if amount < 0:
            raise InvalidArgumentError("Cargo weight to unload cannot be negative.")
        if amount > self.current_load:
            raise InvalidArgumentError(
                f"Cannot unload {amount} kg from container {self.serial_number}; "
                f"current load is {self.current_load} kg."
            )

        self.current_load -= amount
        logger.info(
            "Unloaded %s kg from container %s. Current load: %s kg.",
            amount, self.serial_number, self.current_load,
        )
        return LoadResult(self.serial_number, amount, self.current_load)

    def _details(self) -> str:
        return ""

    def display_info(self) -> str:
        line = (
            f"Container {self.serial_number}: height={self.height:.1f}cm, "
            f"depth={self.depth:.1f}cm, tare weight={self.tare_weight:.1f}kg, "
            f"max load={self.max_load:.1f}kg, current load={self.current_load:.1f}kg"
        )
        return line + self._details()


def _emit_notice(notice: HazardNotice, notify: Optional[HazardCallback]) -> HazardNotice:
    logger.warning("DANGER in container %s: %s", notice.serial_number, notice.message)
    if notify is not None:
        notify(notice)
    return notice


@dataclass
class RefrigeratedContainer(Container):
    kind: ClassVar[ContainerKind] = ContainerKind.REFRIGERATED

    temperature: float = 0.0  # °C
    product_type: str = ""

    def validate_temperature(self, required: float) -> None:
        if self.temperature < required:
            raise InvalidArgumentError(
                f"Container temperature ({self.temperature}°C) is too low for the product. "
                f"Required: {required}°C."
            )

    def _details(self) -> str:
        return f", temperature={self.temperature:.1f}°C, product={self.product_type}"


@dataclass
class LiquidContainer(Container):
    kind: ClassVar[ContainerKind] = ContainerKind.LIQUID

    is_hazardous: bool = False

    @property
    def effective_limit(self) -> float:
        fraction = HAZARDOUS_LOAD_FRACTION if self.is_hazardous else SAFE_LOAD_FRACTION
        return self.max_load * fraction

    def load(self, amount: float, notify: Optional[HazardCallback] = None) -> LoadResult:
        # Warn first, then let the base policy accept or reject.
        limit = self.effective_limit
        notice = None
        if self.current_load + amount > limit:
            notice = self.notify_danger(
                f"Attempted unsafe loading of container {self.serial_number}. "
                f"Maximum allowed weight: {limit} kg.",
                notify,
                value=self.current_load + amount,
                limit=limit,
            )

        result = Container.load(self, amount)
        if notice is not None:
            result.notices.append(notice)
        return result

    def notify_danger(
        self,
        message: str,
        notify: Optional[HazardCallback] = None,
        value: float | None = None,
        limit: float | None = None,
    ) -> HazardNotice:
        return _emit_notice(HazardNotice(self.serial_number, message, value, limit), notify)

    def _details(self) -> str:
        return f", hazardous={'yes' if self.is_hazardous else 'no'}"


@dataclass
class GasContainer(Container):
    kind: ClassVar[ContainerKind] = ContainerKind.GAS

    pressure: float = 0.0

    @property
    def minimum_load(self) -> float:
        return self.max_load * GAS_MIN_REMAINING_FRACTION

    def unload(self, amount: float) -> LoadResult:
        min_load = self.minimum_load
        if self.current_load - amount < min_load:
            raise InvalidArgumentError(
                f"Cannot unload below 5% of max load. Minimum required: {min_load} kg."
            )
        return Container.unload(self, amount)

    def notify_danger(
        self,
        message: str,
        notify: Optional[HazardCallback] = None,
        value: float | None = None,
        limit: float | None = None,
    ) -> HazardNotice:
        return _emit_notice(HazardNotice(self.serial_number, message, value, limit), notify)

    def _details(self) -> str:
        return f", pressure={self.pressure:.1f}"
