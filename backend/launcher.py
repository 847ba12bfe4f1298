"""unitgraph launcher: starts the conversion API with uvicorn."""

from __future__ import annotations

import socket

import uvicorn

from unitgraph.config import settings


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((settings.host, 0))
        return s.getsockname()[1]


def main() -> None:
    port = settings.port or find_free_port()
    print(f"Starting {settings.app_name} on http://{settings.host}:{port}")

    uvicorn.run(
        "unitgraph.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
