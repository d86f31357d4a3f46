"""Nutri-Score calculation."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutricard.domain.nutriscore import NutritionalData, NutritionalScore, ScoreType

GRADE_SCALE = ("A", "B", "C", "D", "E")

ENERGY_LEVELS = (3350, 3015, 2680, 2345, 2010, 1675, 1340, 1005, 670, 335)
SUGARS_LEVELS = (45, 40, 36, 31, 27, 22.5, 18, 13.5, 9, 4.5)
SATURATED_FATTY_ACIDS_LEVELS = (10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
SODIUM_LEVELS = (900, 810, 720, 630, 540, 450, 360, 270, 180, 90)
FIBER_LEVELS = (4.7, 3.7, 2.8, 1.9, 0.9)
PROTEIN_LEVELS = (8, 6.4, 4.8, 3.2, 1.6)

ENERGY_LEVELS_BEVERAGE = (270, 240, 210, 180, 150, 120, 90, 60, 30, 0)
SUGARS_LEVELS_BEVERAGE = (13.5, 12, 10.5, 9, 7.5, 6, 4.5, 3, 1.5, 0)

FOOD_GRADE_LEVELS = (18, 10, 2, -1)
OTHER_GRADE_LEVELS = (9, 5, 1, -2)

# Fruit points use fixed tiers instead of a level table.
_FRUIT_THRESHOLDS = (80, 60, 40)
_FRUIT_POINTS = (5, 2, 1)
_FRUIT_POINTS_BEVERAGE = (10, 4, 2)

_logger = logging.getLogger(__name__)


def points_from_range(value: float, levels: Sequence[float]) -> int:
    """Return points for the first descending level strictly below value."""
    for index, level in enumerate(levels):
        if value > level:
            return len(levels) - index
    return 0


def energy_points(energy_kj: float, score_type: ScoreType) -> int:
    if score_type == ScoreType.BEVERAGE:
        return points_from_range(energy_kj, ENERGY_LEVELS_BEVERAGE)
    return points_from_range(energy_kj, ENERGY_LEVELS)


def sugar_points(sugar_g: float, score_type: ScoreType) -> int:
    if score_type == ScoreType.BEVERAGE:
        return points_from_range(sugar_g, SUGARS_LEVELS_BEVERAGE)
    return points_from_range(sugar_g, SUGARS_LEVELS)


def saturated_fatty_acids_points(saturated_fatty_acids_g: float) -> int:
    return points_from_range(saturated_fatty_acids_g, SATURATED_FATTY_ACIDS_LEVELS)


def sodium_points(sodium_mg: float) -> int:
    return points_from_range(sodium_mg, SODIUM_LEVELS)


def fruit_points(fruits_percent: float, score_type: ScoreType) -> int:
    """Return points for the fruit, vegetable and nut percentage."""
    points = (
        _FRUIT_POINTS_BEVERAGE if score_type == ScoreType.BEVERAGE else _FRUIT_POINTS
    )
    for threshold, tier_points in zip(_FRUIT_THRESHOLDS, points, strict=True):
        if fruits_percent > threshold:
            return tier_points
    return 0


def fiber_points(fiber_g: float) -> int:
    return points_from_range(fiber_g, FIBER_LEVELS)


def protein_points(protein_g: float) -> int:
    return points_from_range(protein_g, PROTEIN_LEVELS)


def calculate_nutri_grade(score: int, score_type: ScoreType) -> str:
    """Map a score to its letter grade for the given category."""
    if score_type == ScoreType.WATER:
        return GRADE_SCALE[0]
    if score_type == ScoreType.FOOD:
        return GRADE_SCALE[points_from_range(score, FOOD_GRADE_LEVELS)]
    return GRADE_SCALE[points_from_range(score, OTHER_GRADE_LEVELS)]


def calculate_nutritional_score(data: NutritionalData) -> NutritionalScore:
    """Calculate the Nutri-Score for a product."""
    score_type = data.score_type
    value = 0
    positive = 0
    negative = 0

    # Water is always graded A.
    if score_type != ScoreType.WATER:
        fruits = fruit_points(data.fruits_percent, score_type)
        fiber = fiber_points(data.fiber_g)
        negative = (
            energy_points(data.energy_kj, score_type)
            + sugar_points(data.sugar_g, score_type)
            + saturated_fatty_acids_points(data.saturated_fatty_acids_g)
            + sodium_points(data.sodium_mg)
        )
        positive = fruits + fiber + protein_points(data.protein_g)

        if score_type == ScoreType.CHEESE:
            value = negative - positive
        elif negative >= 11 and fruits < 5:
            # Protein does not offset high negative points.
            value = negative - fiber - fruits
        else:
            value = negative - positive

    return NutritionalScore(
        value=value,
        grade=calculate_nutri_grade(value, score_type),
        positive=positive,
        negative=negative,
        score_type=score_type,
    )


@dataclass
class NutriScoreService:
    """Service computing Nutri-Scores for incoming products."""

    debug: bool = False

    def score(self, data: NutritionalData) -> NutritionalScore:
        """Calculate and return the score for the nutritional data."""
        result = calculate_nutritional_score(data)
        if self.debug:
            _logger.info("Nutritional data received: %s", data)
            _logger.info(
                "Nutritional score: value=%s grade=%s positive=%s negative=%s",
                result.value,
                result.grade,
                result.positive,
                result.negative,
            )
        return result
