from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    category: str
    image_url: str
    price: int
    benefits: List[str]
    ingredients: List[str]
    suitable_for: List[str]
    match_score: Optional[int] = None


class Recommendation(CamelModel):
    model_config = ConfigDict(frozen=True)

    category: str
    product_type: str = ""
    reason: str = ""
    priority: int = 1
    ingredients: List[str] = Field(default_factory=list)


class FacialFeatures(CamelModel):
    model_config = ConfigDict(frozen=True, str_min_length=1)

    eyes: str
    lips: str
    cheeks: str
    jawline: str
    forehead: str
    nose_shape: str
    skin_texture: str
    symmetry: str


class VisionRecommendation(Recommendation):
    """Recommendation as the vision provider must return it."""
    model_config = ConfigDict(str_min_length=1)

    product_type: str
    reason: str
    priority: int = Field(ge=1)
    ingredients: List[str]


class FacialAnalysis(CamelModel):
    """Validated payload of a vision provider call."""
    model_config = ConfigDict(frozen=True, str_min_length=1)

    skin_type: str
    concerns: List[str]
    features: FacialFeatures
    recommendations: List[VisionRecommendation] = Field(min_length=1)


class AnalysisCreate(CamelModel):
    model_config = ConfigDict(frozen=True)

    image_url: str
    features: FacialFeatures
    skin_type: str
    concerns: Optional[List[str]] = None
    recommendations: List[Recommendation] = Field(default_factory=list)


class Analysis(AnalysisCreate):
    id: int


class AnalyzeRequest(BaseModel):
    image: str = ""
