# sentiment_app/analyze/classifiers.py
import logging
from typing import Optional, Protocol

from sentiment_app.analyze.agent import GeminiSentimentClassifier
from sentiment_app.analyze.models import SentimentVerdict
from sentiment_app.analyze.rule_based import RuleBasedClassifier

logger = logging.getLogger(__name__)


class SentimentClassifier(Protocol):
    name: str

    def classify(self, review: str) -> SentimentVerdict:
        ...


def select_classifier(api_key: Optional[str], model_name: Optional[str] = None) -> SentimentClassifier:
    """Pick the Gemini classifier when a credential is present, else the word-list fallback."""
    if api_key:
        classifier = GeminiSentimentClassifier(api_key, model_name=model_name)
    else:
        classifier = RuleBasedClassifier()

    logger.info(f"Sentiment classifier: {classifier.name}")
    return classifier
