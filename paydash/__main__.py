"""Run the dashboard API with uvicorn: ``python -m paydash``."""

import uvicorn

from paydash.backend.config import settings


def main() -> None:
    uvicorn.run("paydash.backend.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
