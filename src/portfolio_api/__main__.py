"""Development entry point: ``python -m portfolio_api``."""

import uvicorn

from portfolio_api.config import settings


def main() -> None:
    uvicorn.run(
        "portfolio_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        server_header=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
