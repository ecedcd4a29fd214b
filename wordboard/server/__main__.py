"""Run the wordboard server with uvicorn."""

import uvicorn

from wordboard.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "wordboard.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
