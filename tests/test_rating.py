"""Tests for the product rating engine."""

import pytest

from food_scanner.domain.products import ProductCategory, ZeroValuePolicy
from food_scanner.services.rating import (
    generic_sub_scores,
    rate_product,
    round_half_up,
)
from tests.conftest import make_product

DETAIL_KEYS = {"calories", "fat", "sodium", "sugar"}


def test_chocolate_uses_weighted_buckets() -> None:
    product = make_product(
        category="chocolate",
        calories=380,
        sugar=4,
        fat=8,
        sodium=40,
        carbs=15,
        protein=6,
    )

    result = rate_product(product)

    assert result.score == 90
    assert result.rating == 90
    assert result.rating_details == {
        "calories": 75,
        "fat": 100,
        "sodium": 25,
        "sugar": 150,
    }
    assert result.highlights == (
        "Excellent nutritional profile!",
        "Low calorie",
        "Low fat",
        "Low sodium",
        "Low sugar",
    )


def test_chocolate_lowest_buckets() -> None:
    product = make_product(
        category="chocolate",
        calories=550,
        sugar=30,
        fat=35,
        sodium=150,
        carbs=50,
        protein=1,
    )

    result = rate_product(product)

    assert result.score == 19
    assert result.rating_details == {
        "calories": 25,
        "fat": 25,
        "sodium": 0,
        "sugar": 25,
    }
    assert result.highlights[0] == "Needs improvement"


def test_zero_soft_drink_scores_77() -> None:
    product = make_product(category="soft-drink")

    result = rate_product(product)

    assert result.score == 77
    assert result.rating == 77
    assert result.highlights == (
        "Good soft drink choice",
        "Low sugar content",
        "Low calorie",
        "Fat-free",
    )
    assert result.rating_details == {
        "calories": 100,
        "fat": 100,
        "sodium": 85,
        "sugar": 100,
    }


def test_sugary_soft_drink() -> None:
    product = make_product(
        category="soft-drink", calories=42, sugar=10.6, sodium=10, fat=0
    )

    result = rate_product(product)

    assert result.score == 35
    assert result.highlights == ("Unhealthy soft drink", "Fat-free")
    assert result.rating_details == {
        "calories": 25,
        "fat": 100,
        "sodium": 25,
        "sugar": 25,
    }


def test_soft_drink_sodium_boundary() -> None:
    at_limit = rate_product(make_product(category="soft-drink", sodium=5))
    over_limit = rate_product(make_product(category="soft-drink", sodium=6))

    assert at_limit.rating_details["sodium"] == 85
    assert over_limit.rating_details["sodium"] == 25
    assert at_limit.score - over_limit.score == 12


def test_snack_falls_back_to_generic_details() -> None:
    product = make_product(
        category="snack",
        calories=100,
        sugar=1,
        fat=2,
        sodium=100,
        carbs=15,
        protein=8,
    )

    result = rate_product(product)

    assert result.score == 96
    assert result.rating == 96
    assert set(result.rating_details) == DETAIL_KEYS
    assert result.rating_details["calories"] == 95
    assert result.rating_details["sugar"] == 98


def test_snack_protein_contribution_is_capped() -> None:
    product = make_product(category="snack", calories=100, protein=80)

    result = rate_product(product)

    assert result.score == 100
    assert result.rating == 100
    assert "High protein" in result.highlights


def test_generic_all_zero_uses_default_credit() -> None:
    result = rate_product(make_product())

    assert result.score == 26
    assert result.rating == 26
    assert result.highlights == (
        "Needs improvement",
        "Zero calories",
        "Zero fat",
        "Zero sugar",
    )
    assert result.rating_details == {
        "calories": 50,
        "fat": 75,
        "sodium": 75,
        "sugar": 75,
    }


def test_generic_all_zero_with_formula_policy() -> None:
    result = rate_product(make_product(), ZeroValuePolicy.FORMULA)

    assert result.score == 32
    assert result.rating_details == {
        "calories": 100,
        "fat": 100,
        "sodium": 100,
        "sugar": 100,
    }
    assert "Zero sugar" in result.highlights


def test_zero_policy_only_affects_zero_values() -> None:
    product = make_product(calories=100, fat=2, sodium=100, sugar=1, protein=8)

    assert rate_product(product) == rate_product(product, ZeroValuePolicy.FORMULA)


def test_protein_bonus() -> None:
    result = rate_product(make_product(protein=80))

    assert result.score == 35
    assert result.rating == 45
    assert result.highlights == (
        "Needs improvement",
        "High protein",
        "Zero calories",
        "Zero fat",
        "Zero sugar",
    )


def test_sodium_penalty_and_unclamped_details() -> None:
    result = rate_product(make_product(sodium=5000))

    assert result.score == 11
    assert result.rating == 1
    assert result.rating_details["sodium"] == -117
    assert "Low sodium" not in result.highlights


def test_rating_clamped_at_zero() -> None:
    result = rate_product(make_product(sodium=10000))

    assert result.score == -7
    assert result.rating == 0


def test_generic_sub_scores_can_exceed_range() -> None:
    scores = generic_sub_scores(make_product(calories=4000, protein=100))

    assert scores.calories == -20
    assert scores.protein == 40


def test_category_is_case_insensitive() -> None:
    lower = make_product(category="chocolate", calories=380, sugar=4, protein=6)
    upper = make_product(category="CHOCOLATE", calories=380, sugar=4, protein=6)

    assert rate_product(lower) == rate_product(upper)


def test_unknown_category_uses_generic_path() -> None:
    cereal = make_product(category="cereal", calories=370, sugar=12, fat=3)
    plain = make_product(category=None, calories=370, sugar=12, fat=3)

    assert rate_product(cereal) == rate_product(plain)
    assert ProductCategory.from_label("cereal") is ProductCategory.GENERIC


def test_rating_is_idempotent() -> None:
    product = make_product(category="snack", calories=250, sugar=7, sodium=300)

    assert rate_product(product) == rate_product(product)


@pytest.mark.parametrize(
    "product",
    [
        make_product(),
        make_product(category="soft-drink", calories=140, sugar=39, sodium=45),
        make_product(category="chocolate", calories=600, sugar=55, fat=35),
        make_product(category="snack", calories=520, sugar=3, fat=30, sodium=700),
        make_product(calories=2500, fat=90, sodium=3000, sugar=80, protein=200),
        make_product(calories=50, protein=120),
    ],
)
def test_rating_bounds_and_detail_keys(product) -> None:
    result = rate_product(product)

    assert 0 <= result.rating <= 100
    assert set(result.rating_details) == DETAIL_KEYS
    assert len(result.highlights) == len(set(result.highlights))


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(26.0) == 26


def test_rating_details_are_read_only() -> None:
    result = rate_product(make_product(category="chocolate"))

    with pytest.raises(TypeError):
        result.rating_details["calories"] = 0  # type: ignore[index]
    assert dict(result.rating_details)["calories"] == 75
