"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from . import settings

_configured = False


def configure_logging() -> None:
    global _configured
    if _configured:
        return None

    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _configured = True
