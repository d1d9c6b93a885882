"""
Survey API Routes

Endpoint the survey form posts a finished response to.
Table: responses
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_session
from models.models import SurveyResponse, SurveyResponseIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/responses", tags=["survey"])


# ─────────────────────────────────────────────
# POST /responses
# ─────────────────────────────────────────────
@router.post("", summary="Submit a survey response")
def submit_response(payload: SurveyResponseIn, db: Session = Depends(get_session)):
    """
    Store one survey response.
    switch_college is kept only when the respondent would switch.
    """
    try:
        response = SurveyResponse(
            school=payload.school,
            enrolled=payload.enrolled,
            mbti=payload.personality_type,
            college=payload.college,
            fit=payload.major_fits,
            would_switch=payload.would_switch,
            switch_college=payload.switch_college if payload.would_switch else None,
        )
        db.add(response)
        db.flush()
        response_id = response.id
        db.commit()

        logger.info(f"📝 Stored response {response_id} for {payload.personality_type}")
        return {"status": "ok", "id": response_id}

    except Exception as e:
        db.rollback()
        logger.exception("Failed to store survey response")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Database error: {str(e)}"},
        )
