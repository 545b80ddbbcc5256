from typing import Optional

from fastapi import FastAPI
from .core.config import Settings, settings as default_settings
from .core.cors import setup_cors
from .core.errors import setup_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.routers import quizzes as quizzes_router
from .services.quiz_service import QuizService


def create_app(settings: Optional[Settings] = None, service: Optional[QuizService] = None) -> FastAPI:
    """Build the API with its own, empty quiz store.

    Each call returns an independent app; pass ``service`` to share or
    pre-populate the store.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.quiz_service = service if service is not None else QuizService()

    setup_cors(app, settings)
    setup_exception_handlers(app)

    app.include_router(quizzes_router.router, prefix=settings.API_PREFIX)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()
