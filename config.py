"""
Central configuration for Recensor.

All paths, weights, band tables and service settings defined here.
"""
import os
from pathlib import Path

# Paths (absolute)
BASE_DIR = Path(__file__).parent.absolute()
LOGS_DIR = BASE_DIR / "logs"

# Create directories if they don't exist
LOGS_DIR.mkdir(exist_ok=True)

# Service
SERVICE_NAME = "Recensor"
SERVICE_VERSION = "1.0.0"

# FastAPI
API_HOST = os.getenv("RECENSOR_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("RECENSOR_API_PORT", "8000"))

# Component weights for the composite score (must sum to 1.0)
TRUST_WEIGHTS = {
    "rating": 0.30,
    "volume": 0.25,
    "authenticity": 0.25,
    "sentiment": 0.20
}

# Composite score bounds
OVERALL_MIN = 0
OVERALL_MAX = 100

# Rating bands: (threshold, floor, slope), checked highest threshold first.
# Inside a band the score is floor + (rating - threshold) * slope.
RATING_BANDS = [
    (4.5, 90, 20),
    (4.0, 75, 30),
    (3.5, 60, 30),
    (3.0, 40, 40),
    (2.0, 20, 20)
]
# Below the lowest band: rating * slope
RATING_FALLBACK_SLOPE = 10

# Review volume steps: (minimum review count, score)
VOLUME_STEPS = [
    (1000, 95),
    (500, 85),
    (100, 75),
    (50, 65),
    (20, 55),
    (10, 45),
    (5, 35),
    (1, 25)
]
VOLUME_FALLBACK = 0

# Sentiment derived from rating: (minimum rating, score)
SENTIMENT_BANDS = [
    (4.5, 85),
    (4.0, 75),
    (3.5, 65),
    (3.0, 55),
    (2.5, 45)
]
SENTIMENT_FALLBACK = 30

# Authenticity heuristics
AUTHENTICITY_BASE = 70
AUTHENTICITY_MIN = 20
AUTHENTICITY_MAX = 100

# (review count strictly above, bonus) - cumulative
AUTHENTICITY_VOLUME_BONUSES = [
    (100, 10),
    (500, 5)
]

# Title words typical of spam listings
SPAM_KEYWORDS = ["best", "amazing", "incredible", "revolutionary", "magic"]

# (minimum distinct spam keywords, penalty), checked highest first
SPAM_PENALTIES = [
    (3, 20),
    (2, 10)
]

# Near-perfect rating backed by few reviews
SUSPICIOUS_RATING = 4.8
SUSPICIOUS_MAX_REVIEWS = 50
SUSPICIOUS_PENALTY = 15

# Factor generation
MAX_FACTORS = 3
FACTOR_HIGH_THRESHOLD = 80
FACTOR_RULES = {
    # component: (low threshold, high message, low message)
    "rating": (40, "High customer satisfaction", "Below average ratings"),
    "volume": (30, "Large number of reviews", "Limited review data"),
    "authenticity": (50, "Reviews appear authentic", "Potential review quality issues")
}
CONSISTENT_MIN_RATING = 4.0
CONSISTENT_MIN_REVIEWS = 100
NEW_PRODUCT_MAX_REVIEWS = 10
FACTOR_CONSISTENT = "Consistently positive feedback"
FACTOR_NEW_PRODUCT = "New product with limited feedback"

# Presentation bands: (minimum score, label, color)
TRUST_LABELS = [
    (80, "High Trust", "green"),
    (60, "Medium Trust", "yellow")
]
TRUST_LABEL_FALLBACK = ("Low Trust", "red")

# Review text placeholders (not wired into the composite score)
POSITIVE_WORDS = ["good", "great", "excellent", "amazing", "love"]
NEGATIVE_WORDS = ["bad", "terrible", "awful", "hate", "worst"]
SENTIMENT_POSITIVE_BASE = 0.7
SENTIMENT_NEGATIVE_BASE = 0.3
SENTIMENT_NEUTRAL = 0.5
SENTIMENT_STEP = 0.1
FAKE_REVIEW_AUTHENTIC_SCORE = 0.85

# Product source
MARKETPLACE_SEARCH_URL = "https://www.amazon.com/s"
PLACEHOLDER_IMAGE_PATH = "/api/placeholder/300/300"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x300/e5e7eb/6b7280"
MAX_QUERY_LENGTH = 200

# Mock catalogue ({query} is replaced with the search term)
MOCK_PRODUCTS = [
    {
        "id": "1",
        "title": "{query} - Premium Quality",
        "price": "$29.99",
        "rating": 4.3,
        "review_count": 1247
    },
    {
        "id": "2",
        "title": "Best {query} for Budget",
        "price": "$19.99",
        "rating": 3.8,
        "review_count": 892
    },
    {
        "id": "3",
        "title": "Professional {query} Kit",
        "price": "$89.99",
        "rating": 4.7,
        "review_count": 2156
    }
]

# Event ID definitions (Windows Event Viewer style)
EVENT_IDS = {
    # Scoring events (1001-1999)
    1001: "Product scored",
    1002: "Low trust product scored",

    # Search events (2001-2999)
    2001: "Search executed",
    2002: "Search returned no products",
    2003: "Product source failure - search returned zero results",

    # System events (4001-4999)
    4001: "Recensor service started",
    4004: "Demo reset initiated"
}

# Products scoring below this are logged as warnings
LOW_TRUST_THRESHOLD = 60

# Logging settings
EVENT_LOG_FILE = LOGS_DIR / "events.jsonl"
