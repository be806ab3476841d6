"""
Trust Score Engine

Weighted blend of four component scores: rating, volume, authenticity, sentiment.
"""
import math
from typing import Dict, Any, List, Union
from engine.schemas import ProductInput, TrustScoreResult
import config


ProductLike = Union[ProductInput, Dict[str, Any]]


class TrustScorer:
    """
    Compute a 0-100 trust score for a product record.

    Stateless: every call is a pure function of the product fields.

    Components (weights from config.TRUST_WEIGHTS):
    1. Rating (0.30) - piecewise-linear remap of the 1-5 star scale
    2. Volume (0.25) - step function of review count
    3. Authenticity (0.25) - review count bonuses, title spam penalties
    4. Sentiment (0.20) - rating band lookup (no text analysis yet)
    """

    def __init__(self, weights: Dict[str, float] = None):
        self.weights = weights or config.TRUST_WEIGHTS

    def score(self, product: ProductLike) -> int:
        """Overall trust score only."""
        return self.score_detailed(product).overall

    def score_detailed(self, product: ProductLike) -> TrustScoreResult:
        """
        Calculate the full trust score breakdown.

        Args:
            product: ProductInput, or a mapping with rating, reviewCount
                (or review_count) and title

        Returns:
            TrustScoreResult with overall score, component scores and
            up to three explanatory factors
        """
        product = self._coerce(product)

        components = {
            "rating": self.rating_score(product.rating),
            "volume": self.volume_score(product.review_count),
            "authenticity": self.authenticity_score(product),
            "sentiment": self.sentiment_score(product.rating)
        }

        weighted = sum(components[name] * weight for name, weight in self.weights.items())
        if math.isnan(weighted):
            weighted = config.OVERALL_MIN
        overall = _round_half_up(max(config.OVERALL_MIN, min(config.OVERALL_MAX, weighted)))

        return TrustScoreResult(
            overall=overall,
            factors=self.generate_factors(product, components),
            **components
        )

    @staticmethod
    def rating_score(rating: float) -> float:
        for threshold, floor, slope in config.RATING_BANDS:
            if rating >= threshold:
                return floor + (rating - threshold) * slope
        return rating * config.RATING_FALLBACK_SLOPE

    @staticmethod
    def volume_score(review_count: int) -> float:
        # Negative counts fall through to the fallback
        for minimum, score in config.VOLUME_STEPS:
            if review_count >= minimum:
                return score
        return config.VOLUME_FALLBACK

    @staticmethod
    def authenticity_score(product: ProductInput) -> float:
        """
        Heuristic authenticity estimate.

        Starts at config.AUTHENTICITY_BASE, rewards review volume,
        penalises spammy titles and near-perfect ratings with few reviews.
        Clamped to [AUTHENTICITY_MIN, AUTHENTICITY_MAX].
        """
        score = config.AUTHENTICITY_BASE

        for above, bonus in config.AUTHENTICITY_VOLUME_BONUSES:
            if product.review_count > above:
                score += bonus

        title = (product.title or "").lower()
        spam_count = sum(1 for keyword in config.SPAM_KEYWORDS if keyword in title)
        for minimum, penalty in config.SPAM_PENALTIES:
            if spam_count >= minimum:
                score -= penalty
                break

        if product.rating > config.SUSPICIOUS_RATING and product.review_count < config.SUSPICIOUS_MAX_REVIEWS:
            score -= config.SUSPICIOUS_PENALTY

        return max(config.AUTHENTICITY_MIN, min(config.AUTHENTICITY_MAX, score))

    @staticmethod
    def sentiment_score(rating: float) -> float:
        # TODO: blend in review_analyzer.text_sentiment once reviews are fetched
        for minimum, score in config.SENTIMENT_BANDS:
            if rating >= minimum:
                return score
        return config.SENTIMENT_FALLBACK

    @staticmethod
    def generate_factors(product: ProductInput, components: Dict[str, float]) -> List[str]:
        """
        Human-readable reasons behind the score, most relevant first.

        Returns:
            At most config.MAX_FACTORS strings
        """
        factors = []

        for name, (low, high_message, low_message) in config.FACTOR_RULES.items():
            if components[name] >= config.FACTOR_HIGH_THRESHOLD:
                factors.append(high_message)
            elif components[name] <= low:
                factors.append(low_message)

        if product.rating > config.CONSISTENT_MIN_RATING and product.review_count > config.CONSISTENT_MIN_REVIEWS:
            factors.append(config.FACTOR_CONSISTENT)

        if product.review_count < config.NEW_PRODUCT_MAX_REVIEWS:
            factors.append(config.FACTOR_NEW_PRODUCT)

        return factors[:config.MAX_FACTORS]

    @staticmethod
    def _coerce(product: ProductLike) -> ProductInput:
        if isinstance(product, ProductInput):
            return product
        return ProductInput.model_validate(product)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards
    return int(math.floor(value + 0.5))


# Global instance
trust_scorer = TrustScorer()
