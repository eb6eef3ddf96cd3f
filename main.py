# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from sentiment_app.analyze import router as sentiment_router
from sentiment_app.analyze.classifiers import select_classifier
import uvicorn


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Movie Review Sentiment Analyzer", docs_url="/docs")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.classifier = select_classifier(
    settings.GOOGLE_GENERATIVE_AI_API_KEY,
    model_name=settings.GEMINI_MODEL,
)

app.include_router(sentiment_router)


@app.get("/healthz", tags=["Health"])
async def healthz(request: Request) -> dict:
    return {"status": "ok", "classifier": request.app.state.classifier.name}


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=True)
