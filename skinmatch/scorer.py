"""Recommendation scoring.

Turns an analysis (recommended categories and ingredients, skin concerns) into
a ranked, bounded list of catalog products. Scores are additive:

- every product ingredient containing a recommended ingredient
- every recommendation whose category equals the product category
- every product benefit containing one of the analysis concerns

String comparisons ignore case. Products are never modified; the ranked list
holds copies carrying ``match_score``.
"""
from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .models import Analysis, Product


def _fold(text: str) -> str:
    return text.casefold()


def _count_containing(haystack: Iterable[str], needle: str) -> int:
    needle = _fold(needle)
    return sum(1 for item in haystack if needle in _fold(item))


def score_product(product: Product, analysis: Analysis,
                  weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """Compute the relevance of one product for one analysis."""
    score = 0
    category = _fold(product.category)

    for rec in analysis.recommendations:
        for ingredient in rec.ingredients:
            score += weights.ingredient_match * _count_containing(product.ingredients, ingredient)

        if category == _fold(rec.category):
            score += weights.category_match

    for concern in analysis.concerns or []:
        score += weights.concern_match * _count_containing(product.benefits, concern)

    return score


def score_and_rank(analysis: Analysis, products: Sequence[Product],
                   weights: ScoringWeights = DEFAULT_WEIGHTS,
                   limit: Optional[int] = None) -> List[Product]:
    """
    Score every product and return the best matches.

    The result holds at most ``limit`` products (``weights.limit`` when not
    given), ordered by descending ``match_score``. Equal scores keep their
    catalog order.
    """
    if limit is None:
        limit = weights.limit

    scored = [
        product.model_copy(update={"match_score": score_product(product, analysis, weights)})
        for product in products
    ]
    # sorted() is stable, so ties stay in catalog order
    ranked = sorted(scored, key=lambda p: p.match_score, reverse=True)
    return ranked[:limit]
