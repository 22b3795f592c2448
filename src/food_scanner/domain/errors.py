"""Errors raised by product lookup collaborators."""


class FoodScannerError(Exception):
    """Base class for application errors."""


class InvalidBarcodeError(FoodScannerError):
    """Raised when a barcode is not an 8 or 13 digit number."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Invalid barcode: {barcode!r} (expected 8 or 13 digits)")
        self.barcode = barcode


class ProductNotFoundError(FoodScannerError):
    """Raised when no product matches a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product not found: {barcode}")
        self.barcode = barcode


class DatastoreConnectionError(FoodScannerError):
    """Raised when the product datastore cannot be reached."""
