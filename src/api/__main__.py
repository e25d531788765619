"""Entry point for running the web server."""
import uvicorn

from core.config import get_settings
from core.logging import configure_logging


def main() -> None:
    """Run the app with uvicorn using host, port and log level from settings."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
