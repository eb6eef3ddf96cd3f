# tests/conftest.py
import os

# The suite always starts on the word-list path; Gemini is exercised through fakes.
# An empty value survives load_dotenv, which never overrides existing variables.
os.environ["GOOGLE_GENERATIVE_AI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from main import app
from sentiment_app.analyze.views import get_classifier


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_classifier():
    """Swap the injected classifier for the duration of a test."""

    def _use(classifier) -> None:
        app.dependency_overrides[get_classifier] = lambda: classifier

    yield _use
    app.dependency_overrides.clear()
