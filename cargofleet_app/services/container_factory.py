"""
Construction of containers with serial numbers from an injected registry.
"""

from __future__ import annotations

from ..models import (
    GasContainer,
    InvalidArgumentError,
    LiquidContainer,
    RefrigeratedContainer,
    SerialNumberRegistry,
    default_registry,
)


class ContainerFactory:
    """
    Builds containers and assigns each a serial from the registry.

    Without an explicit registry the process-wide default_registry is used, so
    serials stay distinct across factories.
    """

    def __init__(self, registry: SerialNumberRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry

    def refrigerated(
        self,
        height: float,
        depth: float,
        tare_weight: float,
        max_load: float,
        temperature: float,
        product_type: str,
    ) -> RefrigeratedContainer:
        self._validate(height, depth, tare_weight, max_load)
        return RefrigeratedContainer(
            self.registry.next_serial(RefrigeratedContainer.kind),
            height,
            depth,
            tare_weight,
            max_load,
            temperature=temperature,
            product_type=product_type,
        )

    def liquid(
        self,
        height: float,
        depth: float,
        tare_weight: float,
        max_load: float,
        is_hazardous: bool,
    ) -> LiquidContainer:
        self._validate(height, depth, tare_weight, max_load)
        return LiquidContainer(
            self.registry.next_serial(LiquidContainer.kind),
            height,
            depth,
            tare_weight,
            max_load,
            is_hazardous=is_hazardous,
        )

    def gas(
        self,
        height: float,
        depth: float,
        tare_weight: float,
        max_load: float,
        pressure: float,
    ) -> GasContainer:
        self._validate(height, depth, tare_weight, max_load)
        return GasContainer(
            self.registry.next_serial(GasContainer.kind),
            height,
            depth,
            tare_weight,
            max_load,
            pressure=pressure,
        )

    def _validate(self, height: float, depth: float, tare_weight: float, max_load: float) -> None:
        if height <= 0 or depth <= 0:
            raise InvalidArgumentError("Container height and depth must be greater than zero.")
        if tare_weight < 0:
            raise InvalidArgumentError("Tare weight cannot be negative.")
        if max_load <= 0:
            raise InvalidArgumentError("Max load must be greater than zero.")
