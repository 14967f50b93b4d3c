"""Command-line probe for container health checks.

Exits with status 0 when ``GET /health`` answers 2xx with ``status == "OK"``
and 1 otherwise, which is what a Docker ``HEALTHCHECK`` expects.
"""

from __future__ import annotations

import argparse
import logging
import sys

import httpx

from userhub_backend.log_config import configure_logging
from userhub_backend.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 3.0


def probe(url: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> bool:
    """Return ``True`` if the service at *url* reports itself healthy."""
    try:
        response = httpx.get(url, timeout=timeout)
    except httpx.HTTPError as exc:
        logger.error("Health check request to %s failed: %s", url, exc)
        return False
    if not response.is_success:
        logger.error("Health check returned HTTP %d", response.status_code)
        return False
    try:
        payload = response.json()
    except ValueError:
        logger.error("Health check returned a non-JSON body")
        return False
    return isinstance(payload, dict) and payload.get("status") == "OK"


def main(argv: list[str] | None = None) -> int:
    config = get_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--url",
        default=f"http://127.0.0.1:{config.api_port}/health",
        help="health endpoint to query (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS, help="seconds"
    )
    args = parser.parse_args(argv)
    configure_logging(config.log_level)
    return 0 if probe(args.url, timeout=args.timeout) else 1


if __name__ == "__main__":
    sys.exit(main())
