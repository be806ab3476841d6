"""
FastAPI backend for Recensor.

Endpoints:
- POST /api/search: Search products with trust scores
- GET /api/search?q=: Same, for links and quick checks
- POST /api/trust-score: Detailed trust score for a product
- POST /api/trust-score/simple: Overall trust score only
- POST /api/reviews/sentiment: Review text sentiment (placeholder)
- POST /api/reviews/authenticity: Fake review estimate (placeholder)
- GET /api/events: Fetch recent events
- POST /api/demo/reset: Clear event log
- GET /api/status: System health check
"""
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from engine.pipeline import search_pipeline
from engine.scoring.trust_scorer import trust_scorer
from engine.analysis.review_analyzer import review_analyzer
from engine.adapters.product_source import product_source
from engine.logging.event_logger import logger
from engine.utils.presentation import trust_label
from engine.schemas import (
    SearchRequest, SearchResponse, ProductInput, TrustScoreResult,
    SimpleScoreResponse, SentimentRequest, AuthenticityRequest,
    SystemStatus, EventLevel
)
import config

# Create FastAPI app
app = FastAPI(
    title=f"{config.SERVICE_NAME} API",
    version=config.SERVICE_VERSION,
    description="Recensor: Trust scores for product search results"
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)


# ==================== Search Endpoints ====================

@app.post("/api/search", response_model=SearchResponse)
async def search_products(request: SearchRequest):
    """
    Search products and annotate each with a trust score.

    Product source failures come back as an empty result set.
    """
    try:
        result = await search_pipeline.search(
            query_text=request.query,
            user_id=request.user_id
        )
        return SearchResponse(**result)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/search", response_model=SearchResponse)
async def search_products_get(
    q: str = Query(min_length=1, max_length=200),
    user_id: str = "demo-user"
):
    """Search via query string (mirrors /search?q= links)"""
    return await search_products(SearchRequest(query=q, user_id=user_id))


# ==================== Trust Score Endpoints ====================

@app.post("/api/trust-score", response_model=TrustScoreResult)
async def score_product(product: ProductInput):
    """Full trust score breakdown with factors"""
    try:
        return trust_scorer.score_detailed(product)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/trust-score/simple", response_model=SimpleScoreResponse)
async def score_product_simple(product: ProductInput):
    """Overall trust score and badge label"""
    try:
        score = trust_scorer.score(product)
        return SimpleScoreResponse(trust_score=score, trust_label=trust_label(score))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# ==================== Review Analysis Endpoints ====================

@app.post("/api/reviews/sentiment")
async def review_sentiment(request: SentimentRequest):
    """
    Keyword sentiment of a review text.

    Placeholder: not used by the trust score.
    """
    return {"sentiment": review_analyzer.text_sentiment(request.text)}


@app.post("/api/reviews/authenticity")
async def review_authenticity(request: AuthenticityRequest):
    """
    Estimated share of authentic reviews.

    Placeholder: fixed value until fake review detection exists.
    """
    return {"authenticity": review_analyzer.fake_review_score(request.reviews)}


# ==================== Event Endpoints ====================

@app.get("/api/events")
async def get_events(limit: int = 100, level: str = None):
    """
    Fetch recent events from log.

    Args:
        limit: Maximum number of events to return
        level: Filter by event level (Information, Warning, Error, Critical)
    """
    try:
        event_level = EventLevel(level) if level else None
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown event level: {level}")

    events = logger.read_events(limit=limit, level=event_level)
    return {"events": [e.model_dump(mode="json") for e in events]}


# ==================== Demo & System Endpoints ====================

@app.post("/api/demo/reset")
async def reset_demo():
    """
    Reset demo state: clear the event log.

    WARNING: This deletes all logged events!
    """
    try:
        logger.clear()

        await logger.log_system_event(
            event_id=4004,
            message="Demo reset completed - event log cleared"
        )

        return {
            "status": "reset",
            "message": "Event log cleared. Ready for demo."
        }
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Reset failed: {str(e)}")


@app.get("/api/status", response_model=SystemStatus)
async def system_status():
    """System health check"""
    return SystemStatus(
        status="healthy",
        version=config.SERVICE_VERSION,
        product_source=product_source.name,
        event_count=logger.get_event_count()
    )


@app.get("/")
async def root():
    """Health check"""
    return {
        "status": f"{config.SERVICE_NAME} API running",
        "version": config.SERVICE_VERSION,
        "endpoints": {
            "docs": "/docs",
            "search": "/api/search?q=headphones",
            "status": "/api/status"
        }
    }


# ==================== Startup/Shutdown ====================

@app.on_event("startup")
async def startup():
    """Log service start"""
    print(f"Starting {config.SERVICE_NAME} API...")

    await logger.log_system_event(
        event_id=4001,
        message=config.EVENT_IDS[4001],
        details={
            "version": config.SERVICE_VERSION,
            "product_source": product_source.name,
            "weights": config.TRUST_WEIGHTS
        }
    )

    print(f"Product source: {product_source.name}")
    print(f"{config.SERVICE_NAME} API ready!")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup on shutdown"""
    print(f"Shutting down {config.SERVICE_NAME} API...")
