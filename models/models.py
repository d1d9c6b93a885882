from typing import Optional
from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from db import Base


class SurveyResponse(Base):
    __tablename__ = "responses"
    __table_args__ = {'extend_existing': True}  # Ensures CREATE TABLE IF NOT EXISTS behavior
    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)
    school = Column(String, nullable=False)
    enrolled = Column(Boolean, nullable=False, default=False)
    mbti = Column(String(8), index=True, nullable=False)
    college = Column(String, nullable=True)
    fit = Column(Boolean, nullable=True)
    would_switch = Column(Boolean, nullable=True)
    switch_college = Column(String, nullable=True)


class SurveyResponseIn(BaseModel):
    school: str
    enrolled: bool
    personality_type: str = Field(..., description="Four-letter personality type, e.g. INTJ")
    college: Optional[str] = None
    major_fits: Optional[bool] = None
    would_switch: Optional[bool] = None
    switch_college: Optional[str] = None

