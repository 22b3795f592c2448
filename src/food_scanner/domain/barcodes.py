"""Barcode validation."""

from food_scanner.domain.errors import InvalidBarcodeError

BARCODE_LENGTHS = frozenset({8, 13})


def normalize_barcode(raw: str) -> str:
    """Return a trimmed EAN-8 or EAN-13 barcode, or raise InvalidBarcodeError."""
    cleaned = raw.strip()
    if not cleaned.isdigit() or not cleaned.isascii():
        raise InvalidBarcodeError(raw)
    if len(cleaned) not in BARCODE_LENGTHS:
        raise InvalidBarcodeError(raw)
    return cleaned
