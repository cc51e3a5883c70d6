"""
Logging setup for applications embedding the gateway.

The library itself only creates module loggers; call ``configure_logging``
once from the host application to get console (and optional file) output.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from photo_search.core.config import Settings, settings


def configure_logging(source: Optional[Settings] = None) -> None:
    """Configure root logging from settings: console plus optional rotating file."""
    s = source or settings
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if s.log_file:
        Path(s.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                s.log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
        )
    logging.basicConfig(
        level=getattr(logging, s.log_level.upper(), logging.INFO),
        format=s.log_format,
        datefmt=s.log_date_format,
        handlers=handlers,
        force=True,
    )

    # Noisy libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
