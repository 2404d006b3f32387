"""
Demonstration entry point for the cargofleet app.

Builds a ship and three containers, loads them, and reports the outcome.
Capacity errors are logged and do not stop the run.
"""

import logging
import sys
from pathlib import Path

from cargofleet_app.config.settings import Settings, init_logging
from cargofleet_app.models import CargoError, ContainerShip
from cargofleet_app.reports import build_ship_manifest_text
from cargofleet_app.services import ContainerFactory, FleetService

logger = logging.getLogger(__name__)


def run_demo(factory: ContainerFactory | None = None) -> ContainerShip:
    factory = factory or ContainerFactory()
    fleet = FleetService()
    ship = fleet.add_ship(ContainerShip("Ship 1", 10, 100, 40000))

    bananas = factory.refrigerated(200, 200, 500, 20000, 13.3, "Bananas")
    fuel = factory.liquid(200, 200, 600, 15000, True)
    gas = factory.gas(200, 200, 700, 10000, 10)

    try:
        bananas.load(15000)
        fuel.load(7500)
        gas.load(9000)

        ship.load_container(bananas)
        ship.load_container(fuel)
        ship.load_container(gas)

        logger.info("\n%s", ship.display_ship_info())

        try:
            fuel.load(10000)
        except CargoError as exc:
            logger.error("Error: %s", exc)

        gas.unload(8550)
        logger.info("%s", gas.display_info())
    except CargoError as exc:
        logger.error("Error: %s", exc)

    logger.info("\n%s", build_ship_manifest_text(ship))
    return ship


def main() -> None:
    """Bootstraps logging and runs the demonstration scenario."""
    settings = Settings.default()
    init_logging(settings)
    run_demo()


if __name__ == "__main__":
    # Allow running as `python cargofleet_app/main.py` from the project root
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
