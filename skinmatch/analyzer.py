from typing import List, Protocol

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .exceptions import AnalysisNotFoundError, InvalidImageError, ProductNotFoundError
from .models import Analysis, AnalysisCreate, FacialAnalysis, Product, Recommendation
from .parsing import decode_image, to_data_url
from .scorer import score_and_rank
from .storage import Storage


class VisionClient(Protocol):
    def analyze_facial_features(self, image_base64: str) -> FacialAnalysis: ...


class SkinAnalysisService:
    """Runs image analysis and product recommendation over an injected store."""

    def __init__(self, storage: Storage, vision_client: VisionClient,
                 weights: ScoringWeights = DEFAULT_WEIGHTS):
        self.storage = storage
        self.vision_client = vision_client
        self.weights = weights

    def analyze_image(self, image: str) -> Analysis:
        """Analyze a base64 image and store the result."""
        if not image or not isinstance(image, str) or not image.strip():
            raise InvalidImageError("Image is required")

        image_bytes, mime_type = decode_image(image)
        facial_analysis = self.vision_client.analyze_facial_features(image)

        analysis = self.storage.create_analysis(AnalysisCreate(
            image_url=to_data_url(image_bytes, mime_type),
            features=facial_analysis.features,
            skin_type=facial_analysis.skin_type,
            concerns=list(facial_analysis.concerns),
            recommendations=[
                Recommendation.model_validate(rec.model_dump())
                for rec in facial_analysis.recommendations
            ],
        ))
        print(f"Stored analysis {analysis.id} ({analysis.skin_type} skin, "
              f"{len(analysis.recommendations)} recommendations)")
        return analysis

    def get_analysis(self, analysis_id: int) -> Analysis:
        analysis = self.storage.get_analysis(analysis_id)
        if analysis is None:
            raise AnalysisNotFoundError(analysis_id)
        return analysis

    def list_analyses(self) -> List[Analysis]:
        return self.storage.list_analyses()

    def get_recommendations(self, analysis_id: int) -> List[Product]:
        """Rank the catalog against a stored analysis."""
        analysis = self.get_analysis(analysis_id)
        return score_and_rank(analysis, self.storage.list_products(), self.weights)

    def list_products(self) -> List[Product]:
        return self.storage.list_products()

    def get_product(self, product_id: int) -> Product:
        product = self.storage.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
