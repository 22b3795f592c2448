"""Domain models for scanned products and their ratings."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class ProductCategory(StrEnum):
    """Categories with a dedicated scoring algorithm."""

    SOFT_DRINK = "soft-drink"
    SNACK = "snack"
    CHOCOLATE = "chocolate"
    GENERIC = "generic"

    @classmethod
    def from_label(cls, label: str | None) -> "ProductCategory":
        """Resolve a free-text category label, defaulting to GENERIC."""
        if not label:
            return cls.GENERIC
        try:
            return cls(label.lower())
        except ValueError:
            return cls.GENERIC


class ZeroValuePolicy(StrEnum):
    """How the generic path treats a nutrient value of exactly zero."""

    DEFAULT_CREDIT = "default_credit"
    FORMULA = "formula"


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient facts for a packaged product, per 100g or 100ml."""

    barcode: str
    name: str = ""
    category: str | None = None
    calories: float = 0.0
    fat: float = 0.0
    sodium: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    brand: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class RatingResult:
    """Score, final rating, highlights and display breakdown for a product."""

    score: int
    rating: int
    highlights: tuple[str, ...]
    rating_details: Mapping[str, int]


@dataclass(frozen=True)
class ScoredAlternative(NutrientProfile):
    """A candidate product with its computed score attached."""

    score: int = 0
    highlights: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductReport:
    """A looked-up product with its rating and better alternatives."""

    product: NutrientProfile
    rating: RatingResult
    alternatives: tuple[ScoredAlternative, ...]

    @property
    def best_in_category(self) -> bool:
        """Whether no alternative outscored the product."""
        return not self.alternatives
