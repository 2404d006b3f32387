"""
Serial number issuing for containers.

One counter is shared by every container kind, so numbers are unique across
the whole registry regardless of type code.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ..config.limits import SERIAL_PREFIX, SERIAL_START

if TYPE_CHECKING:
    from .container import ContainerKind


class SerialNumberRegistry:
    """Thread-safe counter producing KON-<code>-<n> serial numbers."""

    def __init__(self, start: int = SERIAL_START) -> None:
        self._lock = threading.Lock()
        self._next = start

    def next_serial(self, kind: "ContainerKind") -> str:
        with self._lock:
            number = self._next
            self._next += 1
        return f"{SERIAL_PREFIX}-{kind.value}-{number}"

    def peek(self) -> int:
        """Number the next issued serial will carry."""
        with self._lock:
            return self._next

    def reset(self, start: int = SERIAL_START) -> None:
        with self._lock:
            self._next = start


# Shared by every ContainerFactory built without an explicit registry
default_registry = SerialNumberRegistry()
