"""Run the service with uvicorn: ``python -m svckit``."""

import uvicorn

from svckit.config import settings


def main() -> None:
    uvicorn.run(
        "svckit.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
