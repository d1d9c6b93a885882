"""
Shared fixtures for the recommendation tests.

Points DATABASE_URL at a throwaway SQLite file before db.py is imported.
"""

import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

_TEST_DB_DIR = tempfile.mkdtemp(prefix="college-match-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"

import pytest

from db import Base, engine, SessionLocal
from models.models import SurveyResponse
from recommendation.logic.contracts import SurveyRecord, ScoringConfig


@pytest.fixture
def db_session():
    """Fresh responses table per test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_response(db_session):
    """Insert one row into responses and return it."""
    def _add(mbti="INTJ", college="Engineering", fit=True, would_switch=False,
             enrolled=True, school="BYU", switch_college=None):
        response = SurveyResponse(
            school=school,
            enrolled=enrolled,
            mbti=mbti,
            college=college,
            fit=fit,
            would_switch=would_switch,
            switch_college=switch_college,
        )
        db_session.add(response)
        db_session.commit()
        return response
    return _add


@pytest.fixture
def config():
    """Default weights, independent of any SCORING_* variables in the environment."""
    return ScoringConfig()


def make_record(college, fit=None, would_switch=None, personality_type="INTJ", enrolled=True):
    return SurveyRecord(
        personality_type=personality_type,
        college=college,
        major_fits=fit,
        would_switch=would_switch,
        enrolled=enrolled,
    )


@pytest.fixture
def record():
    return make_record
