"""Process entrypoint: serve the API with uvicorn."""

import logging

import uvicorn

from finite.api.app import create_app
from finite.app_logging import configure_logging
from finite.config import Settings
from finite.containers import build_container


def main() -> None:
    """Run the HTTP server on the configured host and port."""
    settings = Settings()
    configure_logging(settings.log_level)
    app = create_app(build_container(settings))
    logging.getLogger(__name__).info(
        "Finite API running on http://%s:%s", settings.host, settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
