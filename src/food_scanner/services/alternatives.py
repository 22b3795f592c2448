"""Ranking of healthier alternatives within a product category."""

from collections.abc import Callable, Iterable
from dataclasses import fields

from food_scanner.domain.products import (
    NutrientProfile,
    ScoredAlternative,
    ZeroValuePolicy,
)
from food_scanner.services.rating import rate_product

RankingTrace = Callable[[str, dict[str, object]], None]


def rank_alternatives(
    candidates: Iterable[NutrientProfile],
    target: NutrientProfile,
    category: str | None,
    *,
    zero_policy: ZeroValuePolicy = ZeroValuePolicy.DEFAULT_CREDIT,
    trace: RankingTrace | None = None,
) -> list[ScoredAlternative]:
    """Return candidates that strictly outscore the target, best first.

    Candidates are kept only when their category equals ``category`` exactly
    and their barcode differs from the target's. Ties with the target are
    dropped; ties between candidates keep their input order.
    """
    pool = [
        product
        for product in candidates
        if product.category == category and product.barcode != target.barcode
    ]

    target_score = rate_product(target, zero_policy).score
    if trace:
        trace("target", {"barcode": target.barcode, "score": target_score})

    scored = []
    for product in pool:
        result = rate_product(product, zero_policy)
        if trace:
            trace("candidate", {"barcode": product.barcode, "score": result.score})
        scored.append(_with_score(product, result.score, result.highlights))

    better = [item for item in scored if item.score > target_score]
    if trace:
        trace(
            "better",
            {"alternatives": [(item.barcode, item.score) for item in better]},
        )
    return sorted(better, key=lambda item: item.score, reverse=True)


def _with_score(
    product: NutrientProfile, score: int, highlights: tuple[str, ...]
) -> ScoredAlternative:
    values = {
        item.name: getattr(product, item.name) for item in fields(NutrientProfile)
    }
    return ScoredAlternative(**values, score=score, highlights=highlights)
