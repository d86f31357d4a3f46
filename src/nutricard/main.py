"""Command line entrypoint running the API with uvicorn."""

import logging

import uvicorn

from nutricard.app_logging import configure_logging
from nutricard.config import Settings, parse_log_level

_logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> None:
    """Start the HTTP server on the configured host and port."""
    resolved_settings = settings or Settings()
    configure_logging(parse_log_level(resolved_settings.log_level))
    _logger.info("Starting server at port %s...", resolved_settings.port)
    uvicorn.run(
        "nutricard.api.asgi:app",
        host=resolved_settings.host,
        port=resolved_settings.port,
    )


if __name__ == "__main__":
    main()
