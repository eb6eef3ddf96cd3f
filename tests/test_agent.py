import pytest

from sentiment_app.analyze import agent as agent_module
from sentiment_app.analyze import classifiers as classifiers_module
from sentiment_app.analyze.agent import GeminiSentimentClassifier, build_prompt
from sentiment_app.analyze.rule_based import RuleBasedClassifier
from sentiment_app.llm import LLMTransportError, LLMValidationError

VALID_RESULT = {
    "sentiment": "negative",
    "confidence": 0.87,
    "explanation": "The reviewer says the film is not good.",
    "positiveWords": [],
    "negativeWords": ["not good"],
    "wordCounts": {"positive": 0, "negative": 1, "neutral": 5},
}


@pytest.fixture
def gemini(monkeypatch):
    configured = {}
    monkeypatch.setattr(agent_module, "configure_gemini", lambda key: configured.setdefault("key", key))
    classifier = GeminiSentimentClassifier("test-key", model_name="gemini-test", temperature=0.0)
    assert configured["key"] == "test-key"
    return classifier


def test_valid_result_becomes_verdict(monkeypatch, gemini) -> None:
    seen = {}

    def fake_generate(prompt, response_schema, model_name, temperature):
        seen.update(prompt=prompt, schema=response_schema, model=model_name, temperature=temperature)
        return dict(VALID_RESULT)

    monkeypatch.setattr(agent_module, "generate_structured_json", fake_generate)

    verdict = gemini.classify("The film is not good at all")

    assert verdict.sentiment == "negative"
    assert verdict.confidence == 0.87
    assert verdict.negative_words == ["not good"]
    assert 'Review: "The film is not good at all"' in seen["prompt"]
    assert seen["schema"] is agent_module.VERDICT_SCHEMA
    assert seen["model"] == "gemini-test"
    assert seen["temperature"] == 0.0


@pytest.mark.parametrize(
    "broken",
    [
        {**VALID_RESULT, "sentiment": "mixed"},
        {**VALID_RESULT, "confidence": 1.5},
        {k: v for k, v in VALID_RESULT.items() if k != "wordCounts"},
        {**VALID_RESULT, "wordCounts": {"positive": 0, "negative": 1}},
    ],
)
def test_schema_mismatch_is_a_validation_error(monkeypatch, gemini, broken) -> None:
    monkeypatch.setattr(agent_module, "generate_structured_json", lambda *args, **kwargs: broken)

    with pytest.raises(LLMValidationError):
        gemini.classify("whatever")


def test_transport_error_propagates(monkeypatch, gemini) -> None:
    def unreachable(*args, **kwargs):
        raise LLMTransportError("connection refused")

    monkeypatch.setattr(agent_module, "generate_structured_json", unreachable)

    with pytest.raises(LLMTransportError):
        gemini.classify("whatever")


def test_prompt_mentions_negation_and_sarcasm() -> None:
    prompt = build_prompt("Sure, a masterpiece.")

    assert "sarcasm" in prompt
    assert '"not good" is negative' in prompt


def test_select_classifier_without_key() -> None:
    assert isinstance(classifiers_module.select_classifier(None), RuleBasedClassifier)
    assert isinstance(classifiers_module.select_classifier(""), RuleBasedClassifier)


def test_select_classifier_with_key(monkeypatch) -> None:
    monkeypatch.setattr(agent_module, "configure_gemini", lambda key: None)

    classifier = classifiers_module.select_classifier("secret", model_name="gemini-test")

    assert isinstance(classifier, GeminiSentimentClassifier)
    assert classifier.name == "gemini"
    assert classifier.model_name == "gemini-test"
