"""Entry point for running the service as a module."""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "teleprompter.main:create_app",
        factory=True,
        host=settings.service_host,
        port=settings.service_port
    )


if __name__ == "__main__":
    main()
