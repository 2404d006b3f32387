from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import InitVar, dataclass, field
from typing import List

from ..config.limits import KG_PER_TONNE
from .container import Container
from .errors import CapacityExceededError, ContainerNotFoundError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Process-unique ordering key for taking two ships' locks during a transfer
_ship_ids = itertools.count(1)


@dataclass(eq=False)
class ContainerShip:
    """
    A ship carrying containers under a count limit and a total weight limit.

    The weight rating is given in tonnes (max_weight_t) and stored in kg as
    max_weight.
    """

    name: str
    max_speed: float  # knots
    max_containers: int
    max_weight_t: InitVar[float]
    containers: List[Container] = field(default_factory=list)

    max_weight: float = field(default=0.0, init=False)  # kg
    ship_id: int = field(default_factory=lambda: next(_ship_ids), init=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self, max_weight_t: float) -> None:
        self.max_weight = max_weight_t * KG_PER_TONNE

    @property
    def container_count(self) -> int:
        return len(self.containers)

    @property
    def total_weight(self) -> float:
        """Sum of tare + current load over all containers aboard (kg)."""
        return sum(c.gross_weight for c in self.containers)

    @property
    def remaining_weight(self) -> float:
        return self.max_weight - self.total_weight

    def find_container(self, serial_number: str) -> Container | None:
        for container in self.containers:
            if container.serial_number == serial_number:
                return container
        return None

    def can_admit(self, container: Container) -> bool:
        with self._lock:
            try:
                self._check_admission(container)
            except (CapacityExceededError, InvalidArgumentError):
                return False
            return True

    def _check_admission(self, container: Container) -> None:
        if self.find_container(container.serial_number) is not None:
            raise InvalidArgumentError(
                f"Container {container.serial_number} is already aboard ship {self.name}."
            )
        if len(self.containers) >= self.max_containers:
            raise CapacityExceededError(
                f"Maximum number of containers exceeded ({self.max_containers}).",
                kind="count",
                limit=self.max_containers,
                attempted=len(self.containers) + 1,
            )
        projected = self.total_weight + container.gross_weight
        if projected > self.max_weight:
            raise CapacityExceededError(
                f"Maximum ship weight exceeded ({self.max_weight} kg).",
                kind="weight",
                limit=self.max_weight,
                attempted=projected,
            )

    def load_container(self, container: Container) -> None:
        with self._lock:
            self._check_admission(container)
            self.containers.append(container)
        logger.info("Loaded container %s onto ship %s.", container.serial_number, self.name)

    def remove_container(self, serial_number: str) -> Container:
        with self._lock:
            container = self.find_container(serial_number)
            if container is None:
                raise ContainerNotFoundError(
                    f"Container {serial_number} not found.", serial_number=serial_number
                )
            self.containers.remove(container)
        logger.info("Removed container %s from ship %s.", serial_number, self.name)
        return container

    def transfer_container(self, serial_number: str, target: "ContainerShip") -> Container:
        """
        Move a container to another ship as one step.

        If loading onto the target fails for any reason, the container is put
        back at its original position on this ship and the error is re-raised.
        """
        if target is self:
            raise InvalidArgumentError(f"Cannot transfer container {serial_number} to the same ship.")

        first, second = sorted((self, target), key=lambda s: s.ship_id)
        with first._lock, second._lock:
            container = self.find_container(serial_number)
            if container is None:
                raise ContainerNotFoundError(
                    f"Container {serial_number} not found.", serial_number=serial_number
                )
            position = self.containers.index(container)
            self.remove_container(serial_number)
            try:
                target.load_container(container)
            except Exception:
                self.containers.insert(position, container)
                logger.warning(
                    "Transfer of container %s to ship %s failed; restored to ship %s.",
                    serial_number, target.name, self.name,
                )
                raise

        logger.info(
            "Transferred container %s from ship %s to ship %s.",
            serial_number, self.name, target.name,
        )
        return container

    def display_ship_info(self) -> str:
        lines = [
            f"Ship {self.name}: max speed={self.max_speed} knots, "
            f"max containers={self.max_containers}, "
            f"max weight={self.max_weight / KG_PER_TONNE} tonnes",
            "Containers:",
        ]
        if not self.containers:
            lines.append("None")
        else:
            lines.extend(c.display_info() for c in self.containers)
        return "\n".join(lines)
