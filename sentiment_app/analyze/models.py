# sentiment_app/analyze/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from config import SentimentConfig


class WordCounts(BaseModel):
    positive: int = Field(..., ge=0, description="Tokens matched against the positive list")
    negative: int = Field(..., ge=0, description="Tokens matched against the negative list")
    neutral: int = Field(..., ge=0, description="Tokens matching neither list")


class SentimentVerdict(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sentiment: SentimentConfig.SentimentType = Field(
        ..., description="Overall sentiment classification"
    )
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Confidence score of the sentiment prediction"
    )
    explanation: str = Field(
        ..., description="Reason for the assigned sentiment"
    )
    positive_words: List[str] = Field(..., alias="positiveWords")
    negative_words: List[str] = Field(..., alias="negativeWords")
    word_counts: WordCounts = Field(..., alias="wordCounts")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    error: str
