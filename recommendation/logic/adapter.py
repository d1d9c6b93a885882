"""
Data Adapter for Recommendation Engine

Reads eligible survey rows from the responses table and transforms them into
SurveyRecord objects for the engine.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking
- NO DB writes
"""

import logging
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session

from models.models import SurveyResponse
from .contracts import SurveyRecord

logger = logging.getLogger(__name__)


def fetch_eligible_records(db: Session, personality_type: str) -> List[SurveyRecord]:
    """
    Fetch all enrolled responses with a college for one personality type.

    The personality type is matched exactly; callers pass the canonical form.
    Database errors propagate to the caller.

    Args:
        db: Database session
        personality_type: Four-letter type, e.g. "INTJ"

    Returns:
        List of SurveyRecord in storage order
    """
    stmt = (
        select(SurveyResponse.college, SurveyResponse.fit, SurveyResponse.would_switch)
        .where(SurveyResponse.mbti == personality_type)
        .where(SurveyResponse.enrolled.is_(True))
        .where(SurveyResponse.college.is_not(None))
        .order_by(SurveyResponse.id)
    )
    rows = db.execute(stmt).all()

    logger.info(f"🔍 Responses fetched for {personality_type}: {len(rows)}")

    return [
        SurveyRecord(
            personality_type=personality_type,
            college=row.college,
            major_fits=row.fit,
            would_switch=row.would_switch,
            enrolled=True,
        )
        for row in rows
    ]
