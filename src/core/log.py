"""Logging setup.

Diagnostics meant for the user go through the rich console (`--verbose`);
this is the developer-facing log tree, written to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a rich handler on stderr."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
