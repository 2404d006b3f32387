"""
Capacity limits and constants for container and ship loading.

Fractions are applied to a container's nominal max load (kg). Ship weight
limits are given in tonnes and stored in kilograms.
"""

from __future__ import annotations

# Liquid containers: hazardous cargo should stay at or below half the max load
HAZARDOUS_LOAD_FRACTION = 0.5

# Liquid containers: non-hazardous cargo should stay at or below 90% of max load
SAFE_LOAD_FRACTION = 0.9

# Gas containers: at least 5% of max load must remain after unloading
GAS_MIN_REMAINING_FRACTION = 0.05

# Ship max weight is specified in tonnes
KG_PER_TONNE = 1000.0

# Serial numbers: KON-<type code>-<counter>
SERIAL_PREFIX = "KON"
SERIAL_START = 1
