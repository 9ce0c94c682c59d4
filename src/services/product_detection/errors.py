class ProductDetectionError(Exception):
    """Base class for detection pipeline failures."""


class DeepExtractionError(ProductDetectionError):
    """The external extractor answered with something unusable."""


class MarketplaceLookupError(ProductDetectionError):
    """A single lookup failed (not found, timeout). Recoverable per candidate."""


class MarketplaceAuthError(MarketplaceLookupError):
    """The lookup credential itself is invalid or expired. Fatal for verification."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
