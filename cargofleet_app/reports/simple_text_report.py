"""
Simple text-based manifest for a container ship.
"""

from __future__ import annotations

from cargofleet_app.config.limits import KG_PER_TONNE
from cargofleet_app.models import ContainerShip


def _pct(value: float, limit: float) -> float:
    return value / limit * 100.0 if limit > 0 else 0.0


def build_ship_manifest_text(ship: ContainerShip) -> str:
    lines: list[str] = []
    lines.append(ship.display_ship_info())
    lines.append("")
    count = ship.container_count
    weight = ship.total_weight
    lines.append(
        f"Containers aboard: {count} / {ship.max_containers} "
        f"({_pct(count, ship.max_containers):.1f}%)"
    )
    lines.append(
        f"Total weight: {weight / KG_PER_TONNE:.3f} t / {ship.max_weight / KG_PER_TONNE:.3f} t "
        f"({_pct(weight, ship.max_weight):.1f}%)"
    )
    lines.append(f"Remaining weight: {ship.remaining_weight / KG_PER_TONNE:.3f} t")
    return "\n".join(lines)
