from sentiment_app.analyze.views import router

__all__ = ["router"]
