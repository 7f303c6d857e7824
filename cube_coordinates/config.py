"""Validated configuration for grid geometry and path search."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GridSettings(BaseModel):
    """Static layout parameters shared by the index, builder and path finder."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hex_radius: float = Field(default=1.0, gt=0.0)
    scale: float = Field(default=1.0, gt=0.0)
    default_label: str = Field(default="all", min_length=1)
    max_search_iterations: int | None = Field(default=None, ge=1)

    @field_validator("hex_radius", "scale")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @field_validator("default_label")
    @classmethod
    def _strip_label(cls, value: str) -> str:
        label = value.strip()
        if not label:
            raise ValueError("default_label must not be blank")
        return label

    @property
    def radius(self) -> float:
        """Effective hex radius after scaling."""

        return self.hex_radius * self.scale

    @property
    def spacing_x(self) -> float:
        """Horizontal distance between adjacent columns (flat-top layout)."""

        return 1.5 * self.radius

    @property
    def spacing_z(self) -> float:
        """Vertical distance between adjacent hexes in the same column."""

        return math.sqrt(3) * self.radius


DEFAULT_SETTINGS = GridSettings()


__all__ = ["DEFAULT_SETTINGS", "GridSettings"]
