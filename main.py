from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
import os
import logging
from dotenv import load_dotenv

from db import Base, engine
from models.models import SurveyResponse  # noqa: F401  registers the responses table
from recommendation.routes import router as recommendation_router
from survey_routes import router as survey_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting with DATABASE_URL")

app = FastAPI(
    title="Personality College Match API",
    description="Crowd-sourced college recommendations by personality type",
    version="1.0.0",
)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(survey_router)
app.include_router(recommendation_router)


@app.get("/health", tags=["meta"])
def health():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat(), "version": app.version}
