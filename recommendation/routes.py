"""
Recommendation API Routes

Exposes the recommendation engine via REST API.
Single endpoint: POST /recommendations
"""

import logging
from typing import Dict, Any, List
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from db import get_session
from .logic.contracts import CollegeStats, RecommendationResult
from .logic.engine import RecommendationEngine
from .presenter import explain, layout, top_majors, most_popular_colleges

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    personality_type: str = Field(
        ...,
        description="Four-letter personality type, matched exactly",
        examples=["INTJ"],
    )
    include_chart: bool = Field(
        default=True,
        description="Include scatter chart coordinates for all qualifying colleges"
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get college recommendation")
@router.post("/", summary="Get college recommendation", include_in_schema=False)
def get_recommendation(
    request: RecommendationRequest,
    db: Session = Depends(get_session)
):
    """
    Recommend the college whose students of the same personality type report
    the best fit and the fewest regrets.

    **Request Body:**
    - `personality_type`: e.g. "INTJ" (no case or whitespace normalization)
    - `include_chart`: Include scatter chart data (default: True)

    **Response:**
    - Recommended college, up to 2 alternatives, all qualifying colleges
    - Explanation sentence and top majors for the recommended college
    - Scatter chart points, axis bounds and ticks
    """
    try:
        engine = RecommendationEngine(db)
        result = engine.compute_recommendation(request.personality_type)

        return _serialize_result(request.personality_type, result, request.include_chart)

    except Exception as e:
        logger.exception("Recommendation request failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


def _serialize_college(stats: CollegeStats, recommended: str, popular: List[str]) -> Dict[str, Any]:
    """Convert CollegeStats to a JSON-serializable dict with comparison flags."""
    return {
        "college": stats.college,
        "total_responses": stats.total_responses,
        "fit_rate": stats.fit_rate,
        "switch_rate": stats.switch_rate,
        "score": round(stats.score, 2),
        "is_recommended": stats.college == recommended,
        "is_most_popular": stats.college in popular,
    }


def _serialize_result(
    personality_type: str,
    result: RecommendationResult,
    include_chart: bool
) -> Dict[str, Any]:
    recommended_name = result.recommended.college if result.recommended else ""
    popular = most_popular_colleges(result.all_colleges)

    def serialize(stats: CollegeStats) -> Dict[str, Any]:
        return _serialize_college(stats, recommended_name, popular)

    return {
        "personality_type": personality_type,
        "has_enough_data": result.has_enough_data,
        "total_data_points": result.total_data_points,
        "recommended": serialize(result.recommended) if result.recommended else None,
        "alternatives": [serialize(c) for c in result.alternatives],
        "all_colleges": [serialize(c) for c in result.all_colleges],
        "explanation": explain(result.recommended, personality_type) if result.recommended else None,
        "top_majors": top_majors(recommended_name),
        "chart": layout(result.all_colleges).model_dump() if include_chart else None,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "recommendation", "version": "1.0.0"}
