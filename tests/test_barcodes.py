"""Tests for barcode validation."""

import pytest

from food_scanner.domain.barcodes import normalize_barcode
from food_scanner.domain.errors import InvalidBarcodeError


@pytest.mark.parametrize("raw", ["96385074", "5449000000996", " 5449000000996\n"])
def test_accepts_ean8_and_ean13(raw: str) -> None:
    assert normalize_barcode(raw) == raw.strip()


@pytest.mark.parametrize(
    "raw", ["", "1234567", "123456789012", "12345678901234", "12a45678", "١٢٣٤٥٦٧٨"]
)
def test_rejects_malformed_barcodes(raw: str) -> None:
    with pytest.raises(InvalidBarcodeError):
        normalize_barcode(raw)
