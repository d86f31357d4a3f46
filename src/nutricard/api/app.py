"""FastAPI application factory."""

from fastapi import FastAPI

from nutricard.api.cards import router as cards_router
from nutricard.api.nutriscore import router as nutriscore_router
from nutricard.app_logging import configure_logging
from nutricard.config import parse_log_level
from nutricard.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))

    app = FastAPI(title="nutricard")
    app.state.container = container

    app.include_router(cards_router)
    app.include_router(nutriscore_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
