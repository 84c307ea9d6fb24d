"""
Development runner.

Usage:
  SITE_HOST=127.0.0.1 SITE_PORT=8000 python -m webserver.run
"""

from __future__ import annotations

import os

import uvicorn


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    return value if value not in (None, "") else None


def main() -> None:
    host = _get_env("SITE_HOST", "127.0.0.1")
    port = int(_get_env("SITE_PORT", "8000"))

    config = uvicorn.Config(
        "webserver.main:app",
        host=host,
        port=port,
        proxy_headers=True,
    )
    server = uvicorn.Server(config)
    server.run()


if __name__ == "__main__":
    main()
