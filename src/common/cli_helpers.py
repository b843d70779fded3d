"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_existing_path(value: str, field_name: str = "path") -> Path:
    """Parse a filesystem path for argparse arguments.

    Args:
        value: Path string.
        field_name: Name of the field for error messages.

    Returns:
        Parsed Path object.

    Raises:
        argparse.ArgumentTypeError: If the path does not point to a file.
    """
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"{field_name} must be an existing file: {value}")
    return path
