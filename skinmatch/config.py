import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError


class ScoringWeights(BaseModel):
    """Points awarded per match and the size of the ranked list."""
    model_config = ConfigDict(frozen=True)

    ingredient_match: int = Field(default=2, ge=0)
    category_match: int = Field(default=3, ge=0)
    concern_match: int = Field(default=2, ge=0)
    limit: int = Field(default=4, ge=0)


DEFAULT_WEIGHTS = ScoringWeights()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    host: str = "0.0.0.0"
    port: int = 8000
    weights: ScoringWeights = DEFAULT_WEIGHTS


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def get_settings() -> Settings:
    """Read settings from the environment."""
    weights = ScoringWeights(
        ingredient_match=_int_env("SKINMATCH_INGREDIENT_WEIGHT", DEFAULT_WEIGHTS.ingredient_match),
        category_match=_int_env("SKINMATCH_CATEGORY_WEIGHT", DEFAULT_WEIGHTS.category_match),
        concern_match=_int_env("SKINMATCH_CONCERN_WEIGHT", DEFAULT_WEIGHTS.concern_match),
        limit=_int_env("SKINMATCH_RECOMMENDATION_LIMIT", DEFAULT_WEIGHTS.limit),
    )
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        host=os.getenv("SKINMATCH_HOST", "0.0.0.0"),
        port=_int_env("SKINMATCH_PORT", 8000),
        weights=weights,
    )
