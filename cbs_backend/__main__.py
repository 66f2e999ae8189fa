"""Run the API server: python -m cbs_backend"""

import uvicorn

from cbs_backend.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "cbs_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
