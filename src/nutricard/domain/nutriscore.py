"""Nutri-Score domain models.

More about the score: https://en.wikipedia.org/wiki/Nutri-Score
"""

from dataclasses import dataclass
from enum import IntEnum


class ScoreType(IntEnum):
    """Product category driving which scoring rules apply."""

    FOOD = 0
    BEVERAGE = 1
    WATER = 2
    CHEESE = 3


@dataclass(frozen=True)
class NutritionalData:
    """Nutritional measurements per 100g of product."""

    energy_kj: float = 0.0
    sugar_g: float = 0.0
    saturated_fatty_acids_g: float = 0.0
    sodium_mg: float = 0.0
    # Fruits, vegetables, pulses, nuts, and rapeseed, walnut and olive oils.
    fruits_percent: float = 0.0
    fiber_g: float = 0.0
    protein_g: float = 0.0
    is_water: bool = False
    score_type: ScoreType = ScoreType.FOOD


@dataclass(frozen=True)
class NutritionalScore:
    """Calculated score with its point breakdown."""

    value: int
    grade: str
    positive: int
    negative: int
    score_type: ScoreType


def energy_from_kcal(kcal: float) -> float:
    """Convert energy density from kcal to kJ."""
    return kcal * 4.184


def sodium_from_salt(salt_mg: float) -> float:
    """Convert salt content (mg/100g) to sodium content."""
    return salt_mg / 2.5
