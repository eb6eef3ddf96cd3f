# sentiment_app/client/state.py
"""Review form state for the client UI.

The page is always in exactly one phase; every transition is a pure
function that returns a new ReviewFormState, so the UI only has to render
whatever the current state says.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from config import SentimentConfig
from sentiment_app.analyze.models import SentimentVerdict


class ClientPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ReviewFormState:
    review: str = ""
    phase: ClientPhase = ClientPhase.IDLE
    result: Optional[SentimentVerdict] = None
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.phase is ClientPhase.SUBMITTING


def can_submit(state: ReviewFormState) -> bool:
    return not state.loading and bool(state.review.strip())


def edit(state: ReviewFormState, text: str) -> ReviewFormState:
    if state.phase not in (ClientPhase.IDLE, ClientPhase.FAILURE):
        return state
    return replace(state, review=text)


def submit(state: ReviewFormState) -> ReviewFormState:
    if not can_submit(state) or state.phase is ClientPhase.SUCCESS:
        return state
    return replace(state, phase=ClientPhase.SUBMITTING, result=None, error=None)


def succeed(state: ReviewFormState, verdict: SentimentVerdict) -> ReviewFormState:
    if state.phase is not ClientPhase.SUBMITTING:
        return state
    return replace(state, phase=ClientPhase.SUCCESS, result=verdict, error=None)


def fail(state: ReviewFormState, message: str = SentimentConfig.CLIENT_FAILURE) -> ReviewFormState:
    if state.phase is not ClientPhase.SUBMITTING:
        return state
    return replace(state, phase=ClientPhase.FAILURE, result=None, error=message)


def reset(state: ReviewFormState) -> ReviewFormState:
    return ReviewFormState()


def preview_words(words: List[str], limit: int = SentimentConfig.WORD_PREVIEW_LIMIT) -> str:
    """Comma-joined first `limit` words, with a trailing ellipsis when truncated."""
    shown = ", ".join(words[:limit])
    if len(words) > limit:
        shown += "..."
    return shown
