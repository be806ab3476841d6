"""
Pydantic data models for Recensor.

Defines all core data structures: Events, Products, Trust Score results and API payloads.
"""
import math
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from typing import Optional, Dict, Any, List
from datetime import datetime
from enum import Enum


# ==================== Event System ====================

class EventLevel(str, Enum):
    """Windows Event Viewer style event levels"""
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class EventCategory(str, Enum):
    """Event category taxonomy"""
    SCORING = "Scoring"
    SEARCH = "Search"
    SYSTEM = "System"


class Event(BaseModel):
    """
    Windows Event Viewer style event.

    One line of logs/events.jsonl.
    """
    event_id: int  # 1001 to 4004, see config.EVENT_IDS
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    level: EventLevel
    category: EventCategory
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    user_id: Optional[str] = None

    def to_jsonl(self) -> str:
        """Serialize to JSONL format for logging"""
        return self.model_dump_json()


# ==================== Trust Scoring ====================

class Review(BaseModel):
    """Single customer review (reserved for future text analysis)"""
    text: str
    rating: float
    verified: Optional[bool] = None
    date: Optional[str] = None
    helpful: Optional[int] = None


class ProductInput(BaseModel):
    """
    Product record consumed by the trust scorer.

    Ratings and review counts are deliberately not range-checked:
    out-of-range values flow through the formula and only the
    overall score is clamped.
    """
    model_config = ConfigDict(populate_by_name=True)

    rating: float
    review_count: int = Field(alias="reviewCount")
    title: Optional[str] = ""
    price: Optional[str] = None
    description: Optional[str] = None
    reviews: Optional[List[Review]] = None


class TrustScoreResult(BaseModel):
    """
    Composite trust score with its four component scores.

    Components are 0-100 for well-formed input; overall is always
    rounded and clamped to 0-100.
    """
    overall: int = Field(ge=0, le=100)
    rating: float
    volume: float
    authenticity: float
    sentiment: float
    factors: List[str] = Field(default_factory=list, max_length=3)

    @field_serializer("rating", "volume", "authenticity", "sentiment", when_used="json")
    def serialize_components(self, value: float) -> Optional[float]:
        # JSON has no inf/nan; extreme ratings give non-finite components
        return value if math.isfinite(value) else None


# ==================== Search ====================

class Product(BaseModel):
    """Search result record as returned by a product source"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    price: str
    image: str
    rating: float
    review_count: int = Field(alias="reviewCount")
    url: str

    def to_input(self) -> ProductInput:
        """Project the fields the trust scorer uses"""
        return ProductInput(
            rating=self.rating,
            review_count=self.review_count,
            title=self.title,
            price=self.price
        )


class ScoredProduct(BaseModel):
    """Product annotated with its trust score for rendering"""
    product: Product
    trust_score: int
    trust_label: str
    trust_color: str
    thumbnail: str
    breakdown: TrustScoreResult


# ==================== API Request/Response Models ====================

class SearchRequest(BaseModel):
    """API request model for product search"""
    query: str = Field(min_length=1, max_length=200)
    user_id: str = "demo-user"


class SearchResponse(BaseModel):
    """API response model for product search"""
    query: str
    products: List[ScoredProduct]
    total_count: int
    query_id: str
    search_url: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class SimpleScoreResponse(BaseModel):
    """API response model for overall-only scoring"""
    trust_score: int
    trust_label: str


class SentimentRequest(BaseModel):
    """API request model for review text sentiment"""
    text: str


class AuthenticityRequest(BaseModel):
    """API request model for fake review detection"""
    reviews: List[Review] = Field(default_factory=list)


class SystemStatus(BaseModel):
    """API response model for system health check"""
    status: str
    version: str
    product_source: str
    event_count: int
