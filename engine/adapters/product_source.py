"""
Product source adapter for Recensor.

Returns mock search results; a real marketplace integration plugs in here.
"""
from typing import List, Optional
from engine.schemas import Product
from engine.utils.query_processor import QueryProcessor
import config


class ProductSource:
    """
    Mock product catalogue.

    Every query yields the same three records from config.MOCK_PRODUCTS
    with the search term spliced into the titles.
    """

    name = "mock"

    def __init__(self, catalogue: List[dict] = None):
        self.catalogue = catalogue if catalogue is not None else config.MOCK_PRODUCTS

    async def search(self, query: str) -> List[Product]:
        """
        Search products.

        Args:
            query: Normalised search term

        Returns:
            Product records (empty list for an empty query)
        """
        if not query:
            return []

        return [
            Product(
                id=item["id"],
                title=item["title"].format(query=query),
                price=item["price"],
                image=config.PLACEHOLDER_IMAGE_PATH,
                rating=item["rating"],
                review_count=item["review_count"],
                url="#"
            )
            for item in self.catalogue
        ]

    async def get_product_details(self, asin: str) -> Optional[Product]:
        """
        Look up a single product by ASIN.

        Requires marketplace API credentials; not available in the mock
        source, always returns None.
        """
        return None

    def build_search_url(self, query: str) -> str:
        """Marketplace page the results stand in for"""
        return QueryProcessor.build_search_url(query)


# Global instance
product_source = ProductSource()
