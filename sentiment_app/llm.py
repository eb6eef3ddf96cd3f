# sentiment_app/llm.py
import json
import logging
from typing import Any, Dict, Optional

from google import generativeai as genai
from google.api_core import exceptions as google_exceptions

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base class for failures of the Gemini boundary."""


class LLMTransportError(LLMError):
    """Gemini could not be reached or answered with a provider error."""


class LLMValidationError(LLMError):
    """Gemini answered, but the payload is not the JSON we asked for."""


def configure_gemini(api_key: str) -> None:
    genai.configure(api_key=api_key)


def generate_structured_json(
    prompt: str,
    response_schema: Any,
    model_name: str,
    temperature: float = 0.2
) -> Dict[str, Any]:
    """Run `prompt` in Gemini's native JSON mode and decode the answer.

    Raises LLMTransportError when the call itself fails and
    LLMValidationError when the returned text is not a JSON object.
    """
    try:
        model = genai.GenerativeModel(model_name=model_name)
        response = model.generate_content(
            prompt,
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
                temperature=temperature,
            ),
        )
        text: Optional[str] = response.text
    except (google_exceptions.GoogleAPIError, ConnectionError, TimeoutError) as e:
        raise LLMTransportError(f"Gemini call failed: {e}") from e
    except ValueError as e:
        # response.text raises ValueError when the candidate was blocked or empty
        raise LLMTransportError(f"Gemini returned no content: {e}") from e

    logger.debug("Gemini (%s) returned %d chars", model_name, len(text or ""))

    if not text:
        raise LLMTransportError("Gemini returned an empty response")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LLMValidationError(f"Gemini response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise LLMValidationError(f"Expected a JSON object, got {type(data).__name__}")

    return data
