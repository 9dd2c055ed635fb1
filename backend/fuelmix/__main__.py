"""Server entry point — `python -m fuelmix` or the `fuelmix` console script."""

import uvicorn

from fuelmix.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "fuelmix.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
