"""
Review analysis placeholders.

Fixed-value stand-ins for fake review detection and review text sentiment.
Neither feeds the composite trust score.
"""
from typing import List, Optional
from engine.schemas import Review
import config


class ReviewAnalyzer:
    """
    Keyword-level review heuristics.

    Future: ML fake review detection, NLP sentiment analysis
    """

    def __init__(self, positive_words: List[str] = None, negative_words: List[str] = None):
        self.positive_words = positive_words or config.POSITIVE_WORDS
        self.negative_words = negative_words or config.NEGATIVE_WORDS

    def fake_review_score(self, reviews: Optional[List[Review]] = None) -> float:
        """
        Share of reviews estimated authentic.

        Not implemented: always returns config.FAKE_REVIEW_AUTHENTIC_SCORE
        whatever the reviews contain.
        """
        return config.FAKE_REVIEW_AUTHENTIC_SCORE

    def text_sentiment(self, text: str) -> float:
        """
        Crude sentiment of a review text.

        Counts distinct positive and negative words contained in the text
        (substring match, case-insensitive).

        Args:
            text: Review text

        Returns:
            Score between 0.0 (negative) and 1.0 (positive), 0.5 when neutral
            (clamped: the raw formula can reach -0.2 or 1.2)

        Example:
            >>> review_analyzer.text_sentiment("Arrived on time")
            0.5
        """
        text = (text or "").lower()
        positive = sum(1 for word in self.positive_words if word in text)
        negative = sum(1 for word in self.negative_words if word in text)

        if positive > negative:
            score = config.SENTIMENT_POSITIVE_BASE + (positive - negative) * config.SENTIMENT_STEP
        elif negative > positive:
            score = config.SENTIMENT_NEGATIVE_BASE - (negative - positive) * config.SENTIMENT_STEP
        else:
            return config.SENTIMENT_NEUTRAL

        return max(0.0, min(1.0, score))


# Global instance
review_analyzer = ReviewAnalyzer()
