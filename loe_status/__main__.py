from __future__ import annotations

import uvicorn

from loe_status.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "loe_status.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
