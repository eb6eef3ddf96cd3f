from sentiment_app.client.api import AnalyzeRequestError, AnalyzerClient
from sentiment_app.client.state import (
    ClientPhase,
    ReviewFormState,
    can_submit,
    edit,
    fail,
    preview_words,
    reset,
    submit,
    succeed,
)
