"""
Services wrapping the container models: construction and fleet management.
"""

from .container_factory import ContainerFactory
from .fleet_service import FleetService

__all__ = [
    "ContainerFactory",
    "FleetService",
]
