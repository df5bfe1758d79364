import base64

import pytest
from fastapi.testclient import TestClient

from skinmatch.analyzer import SkinAnalysisService
from skinmatch.main import create_app
from skinmatch.models import Analysis, FacialAnalysis, FacialFeatures, Product, Recommendation
from skinmatch.storage import MemStorage

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01" + b"\x00" * 16
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BASE64 = base64.b64encode(JPEG_BYTES).decode("ascii")
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("ascii")

FEATURES = {
    "eyes": "almond",
    "lips": "full",
    "cheeks": "high",
    "jawline": "soft",
    "forehead": "broad",
    "noseShape": "straight",
    "skinTexture": "slightly uneven",
    "symmetry": "balanced",
}

VISION_PAYLOAD = {
    "skinType": "dry",
    "concerns": ["dullness", "brightening"],
    "features": FEATURES,
    "recommendations": [
        {
            "category": "serum",
            "productType": "vitamin C serum",
            "reason": "Evens out dull skin tone",
            "priority": 1,
            "ingredients": ["Vitamin C", "Niacinamide"],
        },
        {
            "category": "moisturizer",
            "productType": "rich cream",
            "reason": "Restores hydration",
            "priority": 2,
            "ingredients": ["Hyaluronic Acid"],
        },
    ],
}


def make_product(id, category="serum", ingredients=(), benefits=(), name=None):
    return Product(
        id=id,
        name=name or f"Product {id}",
        description="test product",
        category=category,
        image_url=f"https://example.com/{id}.jpg",
        price=1000,
        benefits=list(benefits),
        ingredients=list(ingredients),
        suitable_for=["All Skin Types"],
    )


def make_analysis(recommendations=(), concerns=None, skin_type="normal", id=1):
    return Analysis(
        id=id,
        image_url="data:image/jpeg;base64,",
        features=FacialFeatures(**FEATURES),
        skin_type=skin_type,
        concerns=concerns,
        recommendations=[
            Recommendation(category=category, ingredients=list(ingredients))
            for category, ingredients in recommendations
        ],
    )


class FakeVisionClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else VISION_PAYLOAD
        self.error = error
        self.calls = []

    def analyze_facial_features(self, image_base64):
        self.calls.append(image_base64)
        if self.error is not None:
            raise self.error
        return FacialAnalysis.model_validate(self.payload)


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def vision():
    return FakeVisionClient()


@pytest.fixture
def service(storage, vision):
    return SkinAnalysisService(storage, vision)


@pytest.fixture
def client(service):
    return TestClient(create_app(service))
