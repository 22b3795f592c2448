"""Product lookup endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from food_scanner.api.product_models import (
    AlternativeOut,
    AlternativesResponse,
    ProductOut,
    ProductRatingResponse,
    ProductReportResponse,
    RatingOut,
)

if TYPE_CHECKING:
    from food_scanner.containers import AppContainer

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/{barcode}")
async def product_report(barcode: str, request: Request) -> ProductReportResponse:
    """Return a product with its rating and better alternatives."""
    container: AppContainer = request.app.state.container
    report = container.product_service.scan(barcode)
    return ProductReportResponse.from_report(report)


@router.get("/{barcode}/rating")
async def product_rating(barcode: str, request: Request) -> ProductRatingResponse:
    """Return a product with its rating."""
    container: AppContainer = request.app.state.container
    product, rating = container.product_service.rate(barcode)
    return ProductRatingResponse(
        product=ProductOut.from_domain(product),
        rating=RatingOut.from_domain(rating),
    )


@router.get("/{barcode}/alternatives")
async def product_alternatives(barcode: str, request: Request) -> AlternativesResponse:
    """Return better-scoring products from the same category."""
    container: AppContainer = request.app.state.container
    service = container.product_service
    product = service.get_product(barcode)
    alternatives = service.find_alternatives(product)
    return AlternativesResponse(
        barcode=product.barcode,
        alternatives=[AlternativeOut.from_alternative(item) for item in alternatives],
        best_in_category=not alternatives,
    )
