# sentiment_app/analyze/agent.py
import logging

from pydantic import ValidationError

from config import settings
from sentiment_app.analyze.models import SentimentVerdict
from sentiment_app.llm import LLMValidationError, configure_gemini, generate_structured_json

logger = logging.getLogger(__name__)

# Gemini's OpenAPI-subset schema, mirrors SentimentVerdict
VERDICT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "sentiment": {
            "type": "STRING",
            "format": "enum",
            "enum": ["positive", "negative", "neutral"],
        },
        "confidence": {"type": "NUMBER"},
        "explanation": {"type": "STRING"},
        "positiveWords": {"type": "ARRAY", "items": {"type": "STRING"}},
        "negativeWords": {"type": "ARRAY", "items": {"type": "STRING"}},
        "wordCounts": {
            "type": "OBJECT",
            "properties": {
                "positive": {"type": "INTEGER"},
                "negative": {"type": "INTEGER"},
                "neutral": {"type": "INTEGER"},
            },
            "required": ["positive", "negative", "neutral"],
        },
    },
    "required": [
        "sentiment", "confidence", "explanation",
        "positiveWords", "negativeWords", "wordCounts",
    ],
}


def build_prompt(review: str) -> str:
    return f'''Analyze the sentiment of this movie review and provide detailed insights:

Review: "{review}"

Please analyze this review and provide:
1. Overall sentiment (positive, negative, or neutral)
2. Confidence score (0-1) based on how clear the sentiment is
3. A clear explanation of why this sentiment was determined
4. Lists of positive and negative words found in the review
5. Word counts for positive, negative, and neutral words

Consider context, sarcasm, and nuanced language. Remember that "not good" is negative, etc.'''


class GeminiSentimentClassifier:
    name = "gemini"

    def __init__(self, api_key: str, model_name: str = None, temperature: float = None) -> None:
        self.model_name = model_name or settings.GEMINI_MODEL
        self.temperature = settings.GEMINI_TEMPERATURE if temperature is None else temperature
        configure_gemini(api_key)

    def classify(self, review: str) -> SentimentVerdict:
        result = generate_structured_json(
            build_prompt(review),
            VERDICT_SCHEMA,
            model_name=self.model_name,
            temperature=self.temperature,
        )

        try:
            return SentimentVerdict.model_validate(result)
        except ValidationError as e:
            logger.warning(f"Gemini verdict failed validation: {e.error_count()} error(s)")
            raise LLMValidationError(f"Gemini verdict does not match schema: {e}") from e
