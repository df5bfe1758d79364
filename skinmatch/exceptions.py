class SkinMatchError(Exception):
    """Base exception for the project."""


class ConfigurationError(SkinMatchError):
    """Raised when an environment setting cannot be parsed."""


class NotFoundError(SkinMatchError):
    """Raised when a requested record does not exist."""


class AnalysisNotFoundError(NotFoundError):
    def __init__(self, analysis_id: int):
        super().__init__("Analysis not found")
        self.analysis_id = analysis_id


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


class InvalidImageError(SkinMatchError):
    """Raised when the submitted image is missing or not a base64 JPEG/PNG."""


class VisionProviderError(SkinMatchError):
    """Raised when the vision provider is unavailable or its call fails."""


class InvalidAnalysisResponse(VisionProviderError):
    """Raised when the provider reply does not match the analysis schema."""
