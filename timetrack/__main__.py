"""Run the API server with uvicorn: ``python -m timetrack``."""
import uvicorn

from timetrack.config import settings


def main() -> None:
    uvicorn.run(
        "timetrack.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
