"""Run the service with uvicorn.

    python -m warden
"""

import uvicorn

from warden.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "warden.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
