"""Supabase implementation of the product catalogue."""

import math
from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from food_scanner.domain.errors import DatastoreConnectionError
from food_scanner.domain.products import NutrientProfile
from food_scanner.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository for scanned products."""

    client: Client
    table: str = "products"

    def get_by_barcode(self, barcode: str) -> NutrientProfile | None:
        """Return the product with the given barcode, if present."""
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("barcode", barcode)
                .limit(1)
                .execute()
            )
        except (httpx.HTTPError, APIError) as exc:
            raise DatastoreConnectionError(
                f"Failed to fetch product {barcode}: {exc}"
            ) from exc
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def list_by_category(
        self, category: str, exclude_barcode: str, limit: int
    ) -> list[NutrientProfile]:
        """Return products in a category, excluding one barcode."""
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("category", category)
                .neq("barcode", exclude_barcode)
                .limit(limit)
                .execute()
            )
        except (httpx.HTTPError, APIError) as exc:
            raise DatastoreConnectionError(
                f"Failed to fetch alternatives for {category}: {exc}"
            ) from exc
        return [_parse_product(row) for row in response.data or []]

    def close(self) -> None:
        """Close the underlying PostgREST HTTP session."""
        self.client.postgrest.aclose()


def coerce_number(value: object) -> float:
    """Convert a raw column value to a float, treating anything unusable as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_product(row: dict[str, object]) -> NutrientProfile:
    """Parse a products row into a domain model."""
    category = row.get("category")
    return NutrientProfile(
        barcode=str(row.get("barcode", "")),
        name=str(row.get("name") or ""),
        category=str(category) if category is not None else None,
        calories=coerce_number(row.get("energy")),
        fat=coerce_number(row.get("fat")),
        sodium=coerce_number(row.get("sodium")),
        sugar=coerce_number(row.get("sugar")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbohydrate")),
        brand=_optional_text(row.get("brand")),
        image_url=_optional_text(row.get("productimage")),
    )
