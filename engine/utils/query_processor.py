"""
Query preprocessing utilities for Recensor.

Normalises user search terms before they reach a product source.
"""
import re
from urllib.parse import urlencode
import config


class QueryProcessor:
    """
    Clean up and encode product search queries.

    Future: spelling correction, category detection
    """

    WHITESPACE_PATTERN = re.compile(r'\s+')

    @staticmethod
    def normalize(query: str, max_length: int = config.MAX_QUERY_LENGTH) -> str:
        """
        Collapse whitespace and trim the query.

        Args:
            query: Raw user input
            max_length: Hard cap on query length

        Returns:
            Normalised query ("" for empty or None input)

        Example:
            >>> QueryProcessor.normalize("  wireless   earbuds ")
            'wireless earbuds'
        """
        if not query:
            return ""

        collapsed = QueryProcessor.WHITESPACE_PATTERN.sub(" ", query).strip()
        return collapsed[:max_length].rstrip()

    @staticmethod
    def build_search_url(query: str, base_url: str = config.MARKETPLACE_SEARCH_URL) -> str:
        """
        Marketplace search URL for a query.

        Example:
            >>> QueryProcessor.build_search_url("usb c cable")
            'https://www.amazon.com/s?k=usb+c+cable'
        """
        return f"{base_url}?{urlencode({'k': QueryProcessor.normalize(query)})}"

