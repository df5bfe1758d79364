import pytest

from skinmatch.config import DEFAULT_WEIGHTS, ScoringWeights, get_settings
from skinmatch.exceptions import ConfigurationError

ENV_VARS = [
    "GEMINI_API_KEY", "GEMINI_MODEL", "SKINMATCH_HOST", "SKINMATCH_PORT",
    "SKINMATCH_RECOMMENDATION_LIMIT", "SKINMATCH_INGREDIENT_WEIGHT",
    "SKINMATCH_CATEGORY_WEIGHT", "SKINMATCH_CONCERN_WEIGHT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_default_weights():
    assert DEFAULT_WEIGHTS == ScoringWeights(ingredient_match=2, category_match=3, concern_match=2, limit=4)


def test_defaults():
    settings = get_settings()
    assert settings.gemini_api_key is None
    assert settings.gemini_model == "gemini-1.5-flash"
    assert (settings.host, settings.port) == ("0.0.0.0", 8000)
    assert settings.weights == DEFAULT_WEIGHTS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("SKINMATCH_PORT", "9000")
    monkeypatch.setenv("SKINMATCH_CATEGORY_WEIGHT", "5")
    monkeypatch.setenv("SKINMATCH_RECOMMENDATION_LIMIT", "6")

    settings = get_settings()

    assert settings.gemini_api_key == "secret"
    assert settings.port == 9000
    assert settings.weights.category_match == 5
    assert settings.weights.limit == 6
    assert settings.weights.ingredient_match == 2


@pytest.mark.parametrize("value", ["three", "-1", "2.5"])
def test_invalid_values(monkeypatch, value):
    monkeypatch.setenv("SKINMATCH_INGREDIENT_WEIGHT", value)
    with pytest.raises(ConfigurationError, match="SKINMATCH_INGREDIENT_WEIGHT"):
        get_settings()
