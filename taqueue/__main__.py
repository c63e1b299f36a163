"""Run the API server: ``python -m taqueue``."""

import uvicorn

from taqueue.config import settings


def main() -> None:
    uvicorn.run(
        "taqueue.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
