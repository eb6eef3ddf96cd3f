# sentiment_app/client/api.py
import logging

import requests
from pydantic import ValidationError

from config import settings
from sentiment_app.analyze.models import SentimentVerdict

logger = logging.getLogger(__name__)


class AnalyzeRequestError(Exception):
    """Any failure talking to the sentiment service."""


class AnalyzerClient:
    def __init__(self, base_url: str = None, timeout: float = 60.0) -> None:
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout

    def analyze(self, review: str) -> SentimentVerdict:
        try:
            response = requests.post(
                f"{self.base_url}/api/analyze",
                json={"review": review.strip()},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Sentiment service unreachable: {e}")
            raise AnalyzeRequestError("Sentiment service unreachable") from e

        if not response.ok:
            logger.error(f"Sentiment service returned {response.status_code}")
            raise AnalyzeRequestError(f"Sentiment service returned {response.status_code}")

        try:
            return SentimentVerdict.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected response from sentiment service: {e}")
            raise AnalyzeRequestError("Unexpected response from sentiment service") from e
