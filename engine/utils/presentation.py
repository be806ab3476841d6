"""
Presentation helpers for rendering trust scores.

Label and colour bands are display concerns only; the scorer never uses them.
"""
from typing import Tuple
from urllib.parse import quote
import config


def trust_band(score: int) -> Tuple[str, str]:
    """(label, color) for a 0-100 trust score"""
    for minimum, label, color in config.TRUST_LABELS:
        if score >= minimum:
            return label, color
    return config.TRUST_LABEL_FALLBACK


def trust_label(score: int) -> str:
    """
    Badge text for a trust score.

    >= 80 "High Trust", >= 60 "Medium Trust", otherwise "Low Trust".
    """
    return trust_band(score)[0]


def trust_color(score: int) -> str:
    """Badge colour for a trust score: green, yellow or red"""
    return trust_band(score)[1]


def placeholder_image_url(title: str) -> str:
    """Placeholder thumbnail captioned with the first word of the title"""
    words = (title or "").split()
    caption = words[0] if words else ""
    return f"{config.PLACEHOLDER_IMAGE_URL}?text={quote(caption)}"
