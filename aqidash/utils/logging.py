"""Logging helpers."""

from __future__ import annotations

import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=level,
    )
