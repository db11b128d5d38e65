from __future__ import annotations

"""Basic logging configuration."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the roster API."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
