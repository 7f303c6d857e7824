"""Presentation strategy seam.

The core never builds visuals. A rendering layer implements
:class:`TileDisplay` and the grid builder hands it entities to realise or
release; whatever ``create`` returns is stored as the entity's payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .index import Entity


class TileDisplay(Protocol):
    def create(self, entity: Entity) -> Any:
        """Build the visual for ``entity`` and return a handle to it."""

    def release(self, entity: Entity) -> None:
        """Dispose of the visual referenced by ``entity.payload``."""


class NullDisplay:
    """Display strategy that shows nothing."""

    def create(self, entity: Entity) -> Any:
        return None

    def release(self, entity: Entity) -> None:
        return None


__all__ = ["NullDisplay", "TileDisplay"]
