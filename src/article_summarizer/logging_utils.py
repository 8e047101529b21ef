from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

# Shared by log output and the progress bar so log lines render above the live bar
console = Console(stderr=True)


def setup_logging(level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO") -> None:
    """
    Configure a simple, consistent console logger for the project.
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(name)s | %(message)s",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,  # overwrite any prior logging config (useful in notebooks/IDE runs)
    )
    # openai/httpx log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
