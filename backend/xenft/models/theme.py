"""Derived visual theme: color scheme and rarity."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class RarityCategory(str, enum.Enum):
    APEX = "Apex"
    LIMITED = "Limited"
    COMMON = "Common"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Palette:
    primary: str
    secondary: str
    tertiary: str
    background: str


@dataclass(frozen=True)
class ColorScheme:
    """Palette for the current 30-day cycle plus countdown to the next one."""

    palette: Palette
    cycle_index: int
    days_until_next_cycle: int

    @property
    def primary(self) -> str:
        return self.palette.primary

    @property
    def secondary(self) -> str:
        return self.palette.secondary

    @property
    def tertiary(self) -> str:
        return self.palette.tertiary

    @property
    def background(self) -> str:
        return self.palette.background

    @property
    def cycle_label(self) -> str:
        return f"{self.cycle_index + 1}/12"

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
            "background": self.background,
            "cycle_index": self.cycle_index,
            "cycle_label": self.cycle_label,
            "days_until_next_cycle": self.days_until_next_cycle,
        }


@dataclass(frozen=True)
class RarityInfo:
    category: RarityCategory
    rarity: str
    rarity_color: str

    def to_dict(self) -> dict[str, str]:
        return {
            "category": self.category.value,
            "rarity": self.rarity,
            "rarity_color": self.rarity_color,
        }
