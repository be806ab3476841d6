"""
Search Pipeline: fetches products, scores each, annotates them for rendering.
"""
from typing import Dict, Any, List
from uuid import uuid4
from engine.adapters.product_source import product_source
from engine.scoring.trust_scorer import trust_scorer
from engine.logging.event_logger import logger
from engine.schemas import Product, ScoredProduct
from engine.utils.presentation import trust_band, placeholder_image_url
from engine.utils.query_processor import QueryProcessor


class SearchPipeline:
    """
    Product search with trust scoring.

    Flow:
    0. Normalise query
    1. Fetch all products from the product source
    2. Score each product (fetch-all-then-score-each)
    3. Attach label, colour and thumbnail for rendering
    4. Log search and per-product events
    5. Return annotated results

    A product source failure is logged and treated as zero results;
    the scorer is not invoked.
    """

    def __init__(self, source=None, scorer=None):
        self.source = source or product_source
        self.scorer = scorer or trust_scorer

    async def search(self, query_text: str, user_id: str = "default-user") -> Dict[str, Any]:
        """
        Execute product search.

        Args:
            query_text: User search term
            user_id: User identifier (for event log)

        Returns:
            Dict with keys:
            - query: Normalised query
            - products: List of ScoredProduct
            - total_count: Number of products
            - query_id: Unique search identifier
            - search_url: Marketplace page the results stand in for
        """
        query_id = str(uuid4())
        query = QueryProcessor.normalize(query_text)

        # Step 1: Fetch
        try:
            products = await self.source.search(query)
        except Exception as e:
            await logger.log_search(query_id, query, 0, user_id=user_id, error=str(e))
            products = None

        scored = []
        if products is not None:
            await logger.log_search(query_id, query, len(products), user_id=user_id)

            # Step 2-4: Score and annotate
            scored = [await self._score_product(product, query_id, user_id) for product in products]

        return {
            "query": query,
            "products": scored,
            "total_count": len(scored),
            "query_id": query_id,
            "search_url": self.source.build_search_url(query)
        }

    def annotate(self, products: List[Product]) -> List[ScoredProduct]:
        """Score and annotate products without logging"""
        return [self._annotate(product) for product in products]

    async def _score_product(self, product: Product, query_id: str, user_id: str) -> ScoredProduct:
        scored = self._annotate(product)
        await logger.log_product_scored(
            query_id=query_id,
            product_id=product.id,
            title=product.title,
            result=scored.breakdown,
            user_id=user_id
        )
        return scored

    def _annotate(self, product: Product) -> ScoredProduct:
        breakdown = self.scorer.score_detailed(product.to_input())
        label, color = trust_band(breakdown.overall)
        return ScoredProduct(
            product=product,
            trust_score=breakdown.overall,
            trust_label=label,
            trust_color=color,
            thumbnail=placeholder_image_url(product.title),
            breakdown=breakdown
        )


# Global instance
search_pipeline = SearchPipeline()
