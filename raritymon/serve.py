"""
Process entry point.

Runs the API with uvicorn on the configured listen address.
"""

import logging

import uvicorn

from raritymon.config import settings

DEFAULT_PORT = 1337


def parse_listen_address(address: str) -> tuple[str, int]:
    """
    Split "host:port" into its parts.

    An empty host (":1337") listens on all interfaces; a missing port uses
    the default.
    """
    host, sep, port = address.rpartition(":")
    if not sep:
        return address or "0.0.0.0", DEFAULT_PORT
    return host or "0.0.0.0", int(port) if port else DEFAULT_PORT


def main() -> None:
    """CLI entry point for running the API server."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    host, port = parse_listen_address(settings.web_host)
    uvicorn.run("raritymon.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
