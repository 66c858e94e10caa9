"""FastAPI application exposing the skill catalog."""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from skillforge import __version__
from skillforge.api import skills
from skillforge.core.config import Settings, get_settings
from skillforge.core.rate_limit import limiter
from skillforge.skills.catalog import build_default_registry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with a frozen skill registry on ``app.state``."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title=settings.APP_NAME, version=__version__)
    app.state.registry = build_default_registry(disabled=settings.DISABLED_SKILLS)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(skills.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "skills": len(app.state.registry)}

    logger.info(f"{settings.APP_NAME} started with {len(app.state.registry)} skills")
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "skillforge.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
