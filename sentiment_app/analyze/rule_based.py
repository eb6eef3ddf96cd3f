# sentiment_app/analyze/rule_based.py
import re
from typing import List

from config import SentimentConfig
from sentiment_app.analyze.models import SentimentVerdict, WordCounts

# ECMAScript's \s class; Python's \s and str.split() disagree on U+FEFF, U+0085 and \x1c-\x1f
_WHITESPACE = r" \t\n\r\f\v\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_NON_ALPHA = re.compile(r"[^a-z" + _WHITESPACE + r"]")
_SEPARATOR = re.compile(r"[" + _WHITESPACE + r"]+")


def tokenize(review: str) -> List[str]:
    """Lowercase, drop everything but a-z and whitespace, split on whitespace."""
    cleaned = _NON_ALPHA.sub("", review.lower())
    return [token for token in _SEPARATOR.split(cleaned) if token]


def _explain(sentiment: str, pos: int, neg: int) -> str:
    if sentiment == "neutral":
        return "The review contains a similar number of positive and negative words."

    other = "negative" if sentiment == "positive" else "positive"
    winner_count, loser_count = (pos, neg) if sentiment == "positive" else (neg, pos)
    return (
        f"The review contains more {sentiment} words ({winner_count}) "
        f"than {other} words ({loser_count})."
    )


class RuleBasedClassifier:
    """Bag-of-words fallback used when no Gemini credential is configured."""

    name = "rule-based"

    def __init__(
        self,
        positive_words=SentimentConfig.POSITIVE_WORDS,
        negative_words=SentimentConfig.NEGATIVE_WORDS,
    ) -> None:
        self.positive_words = frozenset(positive_words)
        self.negative_words = frozenset(negative_words)

    def classify(self, review: str) -> SentimentVerdict:
        tokens = tokenize(review)

        pos_found: List[str] = []
        neg_found: List[str] = []
        for token in tokens:
            if token in self.positive_words:
                pos_found.append(token)
            elif token in self.negative_words:
                neg_found.append(token)

        pos, neg = len(pos_found), len(neg_found)
        if pos > neg:
            sentiment = "positive"
        elif neg > pos:
            sentiment = "negative"
        else:
            sentiment = "neutral"

        return SentimentVerdict(
            sentiment=sentiment,
            confidence=SentimentConfig.RULE_BASED_CONFIDENCE,
            explanation=_explain(sentiment, pos, neg),
            positive_words=pos_found,
            negative_words=neg_found,
            word_counts=WordCounts(
                positive=pos,
                negative=neg,
                neutral=len(tokens) - pos - neg,
            ),
        )
