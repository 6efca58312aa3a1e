# src/lunatask_client/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it loads settings once and wires
a concrete TaskClient for the commands.
"""

from __future__ import annotations

import logging

from ..api.client import TaskClient
from ..config import get_settings

logger = logging.getLogger(__name__)


def create_client(*, settings=None, transport=None) -> TaskClient:
    """
    Build a TaskClient from the provided settings.

    If settings is None, falls back to get_settings().
    Raises RuntimeError when no access token is configured.
    """
    if settings is None:
        settings = get_settings()

    client = TaskClient.from_settings(settings, transport=transport)
    logger.debug("Lunatask client ready base_url=%s timeout=%s", settings.base_url, settings.timeout_seconds)
    return client
