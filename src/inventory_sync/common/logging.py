"""Shared logging helpers for inventory-sync."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# httpx logs every request at INFO; storage writes would drown the sync summary.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    quiet: Iterable[str] = TRANSPORT_LOGGERS,
) -> None:
    """Initialise the root logger once for CLI output.

    Loggers named in ``quiet`` are held at WARNING unless ``level`` is DEBUG.
    Pass ``force=True`` to replace handlers installed earlier, e.g. in tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in quiet:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
