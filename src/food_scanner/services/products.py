"""Product lookup service tying the datastore to the rating engine."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_scanner.domain.barcodes import normalize_barcode
from food_scanner.domain.errors import ProductNotFoundError
from food_scanner.domain.products import (
    NutrientProfile,
    ProductReport,
    RatingResult,
    ScoredAlternative,
    ZeroValuePolicy,
)
from food_scanner.services.alternatives import rank_alternatives
from food_scanner.services.rating import rate_product

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Read-only access to the product catalogue."""

    def get_by_barcode(self, barcode: str) -> NutrientProfile | None:
        """Return the product with the given barcode, if present."""

    def list_by_category(
        self, category: str, exclude_barcode: str, limit: int
    ) -> list[NutrientProfile]:
        """Return products in a category, excluding one barcode."""


@dataclass
class ProductService:
    """Application service for scanning, rating and comparing products."""

    repository: ProductRepository
    zero_value_policy: ZeroValuePolicy = ZeroValuePolicy.DEFAULT_CREDIT
    alternatives_limit: int = 3
    trace_ranking: bool = False

    def get_product(self, barcode: str) -> NutrientProfile:
        """Validate a barcode and fetch its product."""
        normalized = normalize_barcode(barcode)
        product = self.repository.get_by_barcode(normalized)
        if product is None:
            raise ProductNotFoundError(normalized)
        return product

    def rate(self, barcode: str) -> tuple[NutrientProfile, RatingResult]:
        """Fetch a product and compute its rating."""
        product = self.get_product(barcode)
        return product, rate_product(product, self.zero_value_policy)

    def find_alternatives(self, product: NutrientProfile) -> list[ScoredAlternative]:
        """Return better-scoring products from the same category."""
        if not product.category:
            return []
        candidates = self.repository.list_by_category(
            product.category, product.barcode, self.alternatives_limit
        )
        return rank_alternatives(
            candidates,
            product,
            product.category,
            zero_policy=self.zero_value_policy,
            trace=log_ranking_trace if self.trace_ranking else None,
        )

    def scan(self, barcode: str) -> ProductReport:
        """Look up a product, rate it and rank its alternatives."""
        product, rating = self.rate(barcode)
        alternatives = self.find_alternatives(product)
        _logger.info(
            "Scanned product: barcode=%s score=%s rating=%s alternatives=%s",
            product.barcode,
            rating.score,
            rating.rating,
            len(alternatives),
        )
        return ProductReport(
            product=product, rating=rating, alternatives=tuple(alternatives)
        )


def log_ranking_trace(event: str, values: dict[str, object]) -> None:
    """Ranking trace hook that writes to the service logger."""
    _logger.debug("Ranking %s: %s", event, values)
