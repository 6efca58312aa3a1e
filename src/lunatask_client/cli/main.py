# src/lunatask_client/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the client, runs one command and prints the reply:
    lunatask-client ping
    lunatask-client list [source] [source_id]
    lunatask-client create <area_id> name=... priority=1
"""

from __future__ import annotations

import logging
import sys

import httpx

from ..cli.bootstrap import create_client
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    if not argv or argv[0].lower() in ("help", "h", "?"):
        print(command_registry.build_help())
        return 0

    try:
        client = create_client(settings=settings)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        with client:
            reply = command_registry.handle(client, argv)
    except httpx.HTTPStatusError as e:
        # Already logged with traceback by the client; keep the console short.
        print(
            f"Error: HTTP {e.response.status_code} for {e.request.method} {e.request.url}",
            file=sys.stderr,
        )
        return 1
    except httpx.RequestError as e:
        print(f"Error: request failed ({e.__class__.__name__}): {e}", file=sys.stderr)
        return 1

    print(reply)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
