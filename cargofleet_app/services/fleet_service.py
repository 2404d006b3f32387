"""
Business logic for a fleet of container ships.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from ..models import Container, ContainerShip, InvalidArgumentError, ShipNotFoundError

logger = logging.getLogger(__name__)


class FleetService:
    """Keeps ships by name and moves containers between them."""

    def __init__(self) -> None:
        self._ships: Dict[str, ContainerShip] = {}

    def add_ship(self, ship: ContainerShip) -> ContainerShip:
        if not ship.name.strip():
            raise InvalidArgumentError("Ship name is required.")
        if ship.name in self._ships:
            raise InvalidArgumentError(f"Ship {ship.name} is already in the fleet.")
        if ship.max_containers < 0 or ship.max_weight < 0:
            raise InvalidArgumentError("Ship limits cannot be negative.")
        self._ships[ship.name] = ship
        logger.info("Added ship %s to the fleet.", ship.name)
        return ship

    def get_ship(self, name: str) -> ContainerShip:
        ship = self._ships.get(name)
        if ship is None:
            raise ShipNotFoundError(f"Ship {name} not found.", name=name)
        return ship

    def list_ships(self) -> List[ContainerShip]:
        return list(self._ships.values())

    def locate(self, serial_number: str) -> ContainerShip | None:
        """Return the ship carrying the container, if any."""
        for ship in self._ships.values():
            if ship.find_container(serial_number) is not None:
                return ship
        return None

    def transfer(self, serial_number: str, source_name: str, target_name: str) -> Container:
        source = self.get_ship(source_name)
        target = self.get_ship(target_name)
        return source.transfer_container(serial_number, target)

    def total_cargo_weight(self) -> float:
        """Gross weight (kg) of every container aboard any ship in the fleet."""
        return sum(ship.total_weight for ship in self._ships.values())
