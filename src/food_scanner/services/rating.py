"""Nutritional rating engine for packaged products.

Products in a known category are scored with that category's weighted
buckets. Everything else goes through the generic five-nutrient formula, which
compares each nutrient against a daily reference amount. Both paths then share
the same protein bonus, sodium penalty and final clamp to 0-100.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType

from food_scanner.domain.products import (
    NutrientProfile,
    ProductCategory,
    RatingResult,
    ZeroValuePolicy,
)

MAX_CALORIES = 2000
MAX_FAT = 70
MAX_SODIUM = 2300
MAX_SUGAR = 50
PROTEIN_REFERENCE = 50

LOW_RATIO = 0.7
HIGH_PROTEIN = PROTEIN_REFERENCE * 1.5
HIGH_SODIUM = MAX_SODIUM * LOW_RATIO
PROTEIN_BONUS = 10
SODIUM_PENALTY = 10

SUB_SCORE_MAX = 20
DETAIL_SCALE = 5
DETAIL_KEYS = ("calories", "fat", "sodium", "sugar")

# Sub-score granted on the generic path when a nutrient is exactly zero.
ZERO_VALUE_CREDIT = {
    "calories": 10,
    "fat": 15,
    "sodium": 15,
    "sugar": 15,
    "protein": 10,
}


@dataclass(frozen=True)
class GenericSubScores:
    """Per-nutrient sub-scores of the generic formula, nominally 0-20."""

    calories: float
    fat: float
    sodium: float
    sugar: float
    protein: float

    def total(self) -> float:
        """Sum all five sub-scores."""
        return self.calories + self.fat + self.sodium + self.sugar + self.protein


@dataclass(frozen=True)
class CategoryScore:
    """Result of a category algorithm."""

    score: int
    breakdown: dict[str, int] | None = None


def rate_product(
    product: NutrientProfile,
    zero_policy: ZeroValuePolicy = ZeroValuePolicy.DEFAULT_CREDIT,
) -> RatingResult:
    """Compute the score, rating, highlights and breakdown for a product."""
    category = ProductCategory.from_label(product.category)
    sub_scores = generic_sub_scores(product, zero_policy)
    category_score = score_category(product, category)

    if category_score is None:
        score = round_half_up((sub_scores.total() / 5) * 2)
        breakdown = None
    else:
        score = category_score.score
        breakdown = category_score.breakdown

    rating = score
    if product.protein >= HIGH_PROTEIN:
        rating += PROTEIN_BONUS
    if product.sodium > HIGH_SODIUM:
        rating -= SODIUM_PENALTY
    rating = max(0, min(100, rating))

    if breakdown is not None:
        details = {key: breakdown[key] * DETAIL_SCALE for key in DETAIL_KEYS}
    else:
        details = {
            key: round_half_up(getattr(sub_scores, key) * DETAIL_SCALE)
            for key in DETAIL_KEYS
        }

    return RatingResult(
        score=score,
        rating=rating,
        highlights=tuple(build_highlights(product, rating, category)),
        rating_details=MappingProxyType(details),
    )


def score_category(
    product: NutrientProfile, category: ProductCategory
) -> CategoryScore | None:
    """Run the category algorithm, or return None for the generic path."""
    if category is ProductCategory.CHOCOLATE:
        return _score_chocolate(product)
    if category is ProductCategory.SOFT_DRINK:
        return _score_soft_drink(product)
    if category is ProductCategory.SNACK:
        return _score_snack(product)
    return None


def generic_sub_scores(
    product: NutrientProfile,
    zero_policy: ZeroValuePolicy = ZeroValuePolicy.DEFAULT_CREDIT,
) -> GenericSubScores:
    """Compute the unclamped generic sub-scores.

    Calories, fat, sodium and sugar lose points linearly as they approach the
    daily reference and go negative past it. Protein gains points linearly and
    can exceed 20. Under ``ZeroValuePolicy.DEFAULT_CREDIT`` a zero value gets a
    fixed credit instead of the formula.
    """
    credit = zero_policy is ZeroValuePolicy.DEFAULT_CREDIT

    def limit(value: float, maximum: float, name: str) -> float:
        if credit and not value > 0:
            return ZERO_VALUE_CREDIT[name]
        return SUB_SCORE_MAX - (value / maximum * SUB_SCORE_MAX)

    if credit and not product.protein > 0:
        protein = float(ZERO_VALUE_CREDIT["protein"])
    else:
        protein = product.protein / PROTEIN_REFERENCE * SUB_SCORE_MAX

    return GenericSubScores(
        calories=limit(product.calories, MAX_CALORIES, "calories"),
        fat=limit(product.fat, MAX_FAT, "fat"),
        sodium=limit(product.sodium, MAX_SODIUM, "sodium"),
        sugar=limit(product.sugar, MAX_SUGAR, "sugar"),
        protein=protein,
    )


def build_highlights(
    product: NutrientProfile, rating: int, category: ProductCategory
) -> list[str]:
    """Return qualitative tags for a rated product."""
    if category is ProductCategory.SOFT_DRINK:
        return _soft_drink_highlights(product, rating)

    highlights = [
        _tier(
            rating,
            (
                (90, "Excellent nutritional profile!"),
                (70, "Good nutritional balance"),
                (50, "Moderate nutritional value"),
            ),
            "Needs improvement",
        )
    ]
    if 0 < product.calories <= MAX_CALORIES * LOW_RATIO:
        highlights.append("Low calorie")
    if 0 < product.fat <= MAX_FAT * LOW_RATIO:
        highlights.append("Low fat")
    if 0 < product.sodium <= MAX_SODIUM * LOW_RATIO:
        highlights.append("Low sodium")
    if 0 < product.sugar <= MAX_SUGAR * LOW_RATIO:
        highlights.append("Low sugar")
    if product.protein >= HIGH_PROTEIN:
        highlights.append("High protein")
    if product.calories == 0:
        highlights.append("Zero calories")
    if product.fat == 0:
        highlights.append("Zero fat")
    if product.sugar == 0:
        highlights.append("Zero sugar")
    return highlights


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def _soft_drink_highlights(product: NutrientProfile, rating: int) -> list[str]:
    highlights = [
        _tier(
            rating,
            (
                (85, "Excellent soft drink choice!"),
                (70, "Good soft drink choice"),
                (50, "Moderate soft drink choice"),
            ),
            "Unhealthy soft drink",
        )
    ]
    if product.sugar <= 5:
        highlights.append("Low sugar content")
    if product.calories <= 25:
        highlights.append("Low calorie")
    if product.fat == 0:
        highlights.append("Fat-free")
    return highlights


def _tier(rating: int, tiers: tuple[tuple[int, str], ...], default: str) -> str:
    for minimum, label in tiers:
        if rating >= minimum:
            return label
    return default


def _at_most(
    value: float, buckets: tuple[tuple[float, int], ...], default: int
) -> int:
    """Return the points of the first bucket whose upper bound covers value."""
    for upper, points in buckets:
        if value <= upper:
            return points
    return default


def _score_chocolate(product: NutrientProfile) -> CategoryScore:
    breakdown = {
        "calories": _at_most(product.calories, ((400, 15), (500, 10)), 5),
        "sugar": _at_most(product.sugar, ((5, 30), (15, 20), (25, 10)), 5),
        "fat": _at_most(product.fat, ((10, 20), (20, 15), (30, 10)), 5),
        "sodium": _at_most(product.sodium, ((50, 5), (100, 3)), 0),
        "carbs": _at_most(product.carbs, ((20, 10), (40, 5)), 2),
    }
    # Protein counts towards the score but is not displayed.
    if product.protein >= 5:
        protein = 10
    elif product.protein >= 2:
        protein = 5
    else:
        protein = 2
    return CategoryScore(score=sum(breakdown.values()) + protein, breakdown=breakdown)


def _score_soft_drink(product: NutrientProfile) -> CategoryScore:
    breakdown = {
        "calories": 20 if product.calories == 0 else 5,
        "sugar": 20 if product.sugar == 0 else 5,
        "sodium": 17 if product.sodium <= 5 else 5,
        "fat": 20 if product.fat == 0 else 5,
    }
    return CategoryScore(score=sum(breakdown.values()), breakdown=breakdown)


def _score_snack(product: NutrientProfile) -> CategoryScore:
    score: float = 0
    score += _at_most(product.calories, ((200, 15), (400, 10)), 5)
    score += _at_most(product.sugar, ((2, 20), (5, 15), (10, 10)), 5)
    score += _at_most(product.fat, ((3, 20), (10, 15)), 5)
    score += _at_most(product.sodium, ((120, 15), (250, 10)), 5)
    score += _at_most(product.carbs, ((20, 10),), 5)
    if product.protein >= 5:
        score += min(product.protein * 2, 20)
    else:
        score += 5
    return CategoryScore(score=round_half_up(score))
