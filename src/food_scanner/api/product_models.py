"""Pydantic response models for the product API."""

from pydantic import BaseModel, Field

from food_scanner.domain.products import (
    NutrientProfile,
    ProductReport,
    RatingResult,
    ScoredAlternative,
)


class ProductOut(BaseModel):
    """Product identity and nutrient facts."""

    barcode: str
    name: str
    brand: str | None = None
    category: str | None = None
    image_url: str | None = None
    calories: float
    fat: float
    sodium: float
    sugar: float
    protein: float
    carbs: float

    @classmethod
    def from_domain(cls, product: NutrientProfile) -> "ProductOut":
        """Build a response model from a domain product."""
        return cls(
            barcode=product.barcode,
            name=product.name,
            brand=product.brand,
            category=product.category,
            image_url=product.image_url,
            calories=product.calories,
            fat=product.fat,
            sodium=product.sodium,
            sugar=product.sugar,
            protein=product.protein,
            carbs=product.carbs,
        )


class RatingDetailsOut(BaseModel):
    """Per-nutrient display scores, nominally 0-100."""

    calories: int
    fat: int
    sodium: int
    sugar: int


class RatingOut(BaseModel):
    """Rating of a single product."""

    score: int
    rating: int = Field(ge=0, le=100)
    highlights: list[str]
    rating_details: RatingDetailsOut

    @classmethod
    def from_domain(cls, result: RatingResult) -> "RatingOut":
        """Build a response model from a rating result."""
        return cls(
            score=result.score,
            rating=result.rating,
            highlights=list(result.highlights),
            rating_details=RatingDetailsOut(**result.rating_details),
        )


class AlternativeOut(ProductOut):
    """A better-scoring product from the same category."""

    score: int
    highlights: list[str]

    @classmethod
    def from_alternative(cls, alternative: ScoredAlternative) -> "AlternativeOut":
        """Build a response model from a scored alternative."""
        base = ProductOut.from_domain(alternative).model_dump()
        return cls(
            **base,
            score=alternative.score,
            highlights=list(alternative.highlights),
        )


class ProductRatingResponse(BaseModel):
    """Product with its rating."""

    product: ProductOut
    rating: RatingOut


class AlternativesResponse(BaseModel):
    """Better alternatives for a product."""

    barcode: str
    alternatives: list[AlternativeOut]
    best_in_category: bool


class ProductReportResponse(BaseModel):
    """Full scan result shown on the product page."""

    product: ProductOut
    rating: RatingOut
    alternatives: list[AlternativeOut]
    best_in_category: bool

    @classmethod
    def from_report(cls, report: ProductReport) -> "ProductReportResponse":
        """Build a response model from a product report."""
        return cls(
            product=ProductOut.from_domain(report.product),
            rating=RatingOut.from_domain(report.rating),
            alternatives=[
                AlternativeOut.from_alternative(item) for item in report.alternatives
            ],
            best_in_category=report.best_in_category,
        )
