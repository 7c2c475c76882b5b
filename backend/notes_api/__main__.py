from __future__ import annotations

import uvicorn

from notes_api.config import settings


def run() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
