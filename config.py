# config.py
from pathlib import Path
from dotenv import load_dotenv
import os
from typing import Literal, Optional


BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    GOOGLE_GENERATIVE_AI_API_KEY: Optional[str] = os.getenv("GOOGLE_GENERATIVE_AI_API_KEY") or None
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


class SentimentConfig:
    SentimentType = Literal["positive", "negative", "neutral"]

# ────────────────────── RULE-BASED WORD LISTS ──────────────────────
    POSITIVE_WORDS = frozenset({
        "amazing", "awesome", "brilliant", "excellent", "fantastic",
        "fun", "good", "great", "incredible", "love",
        "loved", "marvelous", "outstanding", "superb", "wonderful",
    })

    NEGATIVE_WORDS = frozenset({
        "awful", "bad", "boring", "confusing", "disappointing",
        "dreadful", "hate", "hated", "horrible", "poor",
        "terrible", "trash", "worst",
    })

    RULE_BASED_CONFIDENCE = 0.5

    # Fixed messages returned to clients
    REVIEW_REQUIRED = "Review text is required"
    ANALYSIS_FAILED = "Failed to analyze sentiment"
    CLIENT_FAILURE = "Failed to analyze sentiment. Please try again."

    WORD_PREVIEW_LIMIT = 10


settings = Settings()
