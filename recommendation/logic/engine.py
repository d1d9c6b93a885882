"""
Recommendation Engine

Main orchestrator that combines retrieval, aggregation and ranking into a single pipeline.
This is the primary entry point for computing a college recommendation.
"""

import time
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from .contracts import SurveyRecord, RecommendationResult, ScoringConfig, load_scoring_config
from .adapter import fetch_eligible_records
from .aggregator import aggregate_colleges
from .ranker import rank_colleges, select_recommendation

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Computes which college fits a personality type best.

    Pipeline flow:
    1. Retrieval - Fetch eligible responses for the type from DB
    2. Aggregation - Group by college, compute fit/switch rates and score
    3. Filtering - Drop colleges below the minimum sample size
    4. Ranking - Sort by score, pick recommended + alternatives

    Every failure (DB down, no rows, too few answers) ends in a result with
    has_enough_data=False; nothing is raised to the caller.
    """

    def __init__(self, db: Session, config: Optional[ScoringConfig] = None):
        """
        Initialize the recommendation engine.

        Args:
            db: Database session used for the read
            config: Scoring configuration. If None, loaded from the environment.
        """
        self.db = db
        self.config = config or load_scoring_config()
        self.version = "1.0.0"

    def compute_recommendation(self, personality_type: str) -> RecommendationResult:
        """
        Compute the recommendation for one personality type.

        Args:
            personality_type: Exact-match key, e.g. "INTJ"

        Returns:
            RecommendationResult
        """
        start_time = time.perf_counter()

        try:
            records = fetch_eligible_records(self.db, personality_type)
        except Exception:
            logger.exception(f"❌ Failed to fetch responses for {personality_type}")
            return RecommendationResult.empty()

        try:
            result = self.recommend_from_records(records)
        except Exception:
            logger.exception(f"❌ Failed to aggregate responses for {personality_type}")
            return RecommendationResult.empty()

        if not records:
            logger.warning(f"⚠️ No responses found for {personality_type}")
        elif not result.has_enough_data:
            logger.warning(
                f"⚠️ {len(records)} response(s) for {personality_type}, "
                f"but no college has {self.config.min_responses} or more"
            )
        else:
            logger.info(
                f"🏆 Recommended for {personality_type}: {result.recommended.college} "
                f"(score {result.recommended.score:.2f})"
            )

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✨ Recommendation pipeline complete ({processing_time:.2f}ms)")

        return result

    def recommend_from_records(self, records: List[SurveyRecord]) -> RecommendationResult:
        """
        Run aggregation and ranking on already fetched records.

        Args:
            records: Eligible survey records for one personality type

        Returns:
            RecommendationResult
        """
        colleges = aggregate_colleges(records, self.config)
        logger.info(f"📊 Colleges with enough answers: {len(colleges)}")

        ranked = rank_colleges(colleges)
        return select_recommendation(
            ranked,
            total_data_points=len(records),
            max_alternatives=self.config.max_alternatives,
        )


# Convenience function for simple usage
def compute_recommendation(
    db: Session,
    personality_type: str,
    config: Optional[ScoringConfig] = None
) -> RecommendationResult:
    """
    Convenience function to compute a recommendation.

    Args:
        db: Database session
        personality_type: Exact-match key
        config: Optional scoring configuration

    Returns:
        RecommendationResult
    """
    engine = RecommendationEngine(db, config)
    return engine.compute_recommendation(personality_type)
