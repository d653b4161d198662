"""Common CLI helper utilities."""

from __future__ import annotations

import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def preview(text: str, width: int = 80) -> str:
    """Shorten text for log output, marking truncation with an ellipsis."""
    if len(text) <= width:
        return text
    return text[:width] + "..."
