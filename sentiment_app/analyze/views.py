# sentiment_app/analyze/views.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from config import SentimentConfig
from sentiment_app.analyze.classifiers import SentimentClassifier
from sentiment_app.analyze.models import ErrorResponse, SentimentVerdict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Sentiment Analysis"])


def get_classifier(request: Request) -> SentimentClassifier:
    return request.app.state.classifier


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/analyze",
    response_model=SentimentVerdict,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_review(request: Request, classifier: SentimentClassifier = Depends(get_classifier)):
    try:
        body = await request.json()
        if body is None:
            raise ValueError("Request body is JSON null")
        review = body.get("review") if isinstance(body, dict) else None
        if not review or not isinstance(review, str):
            return _error(400, SentimentConfig.REVIEW_REQUIRED)

        verdict = await run_in_threadpool(classifier.classify, review)
        return JSONResponse(content=verdict.to_payload())
    except Exception:
        logger.exception(f"Error analyzing sentiment with {getattr(classifier, 'name', 'classifier')}")
        return _error(500, SentimentConfig.ANALYSIS_FAILED)
