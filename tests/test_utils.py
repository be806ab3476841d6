"""
Unit tests for query preprocessing and presentation helpers.
"""
import pytest

from engine.utils.presentation import trust_band, trust_label, trust_color, placeholder_image_url
from engine.utils.query_processor import QueryProcessor


class TestQueryProcessor:
    """Test query normalisation and URL building."""

    def test_normalize_collapses_whitespace(self):
        """Test runs of whitespace become single spaces."""
        assert QueryProcessor.normalize("  wireless \t  earbuds\n") == "wireless earbuds"

    def test_normalize_empty(self):
        """Test empty and None inputs."""
        assert QueryProcessor.normalize("") == ""
        assert QueryProcessor.normalize(None) == ""
        assert QueryProcessor.normalize("   ") == ""

    def test_normalize_caps_length(self):
        """Test long queries are truncated."""
        assert QueryProcessor.normalize("a" * 500, max_length=10) == "a" * 10

    def test_build_search_url(self):
        """Test query is URL-encoded."""
        url = QueryProcessor.build_search_url("usb c & hdmi")
        assert url == "https://www.amazon.com/s?k=usb+c+%26+hdmi"


class TestPresentation:
    """Test trust badge mapping."""

    @pytest.mark.parametrize("score,label,color", [
        (100, "High Trust", "green"),
        (80, "High Trust", "green"),
        (79, "Medium Trust", "yellow"),
        (60, "Medium Trust", "yellow"),
        (59, "Low Trust", "red"),
        (0, "Low Trust", "red"),
    ])
    def test_bands(self, score, label, color):
        """Test label and colour thresholds."""
        assert trust_band(score) == (label, color)
        assert trust_label(score) == label
        assert trust_color(score) == color

    def test_placeholder_uses_first_word(self):
        """Test placeholder caption is the first title word."""
        url = placeholder_image_url("Professional Drone Kit")
        assert url.endswith("?text=Professional")

    def test_placeholder_escapes_caption(self):
        """Test caption is percent-encoded."""
        assert placeholder_image_url("Café Grinder").endswith("?text=Caf%C3%A9")

    def test_placeholder_empty_title(self):
        """Test empty title still yields a URL."""
        assert placeholder_image_url("").endswith("?text=")
