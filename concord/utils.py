"""
Concord Utility Functions
=========================
Common utility functions used across the Concord chat services.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

# ================================================================================
# LOGGING
# ================================================================================

def setup_logger(name: str = "concord", level: str = "INFO") -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


log = setup_logger()


# ================================================================================
# STRING UTILITIES
# ================================================================================

def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to max length with suffix."""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length - len(suffix)] + suffix


def dedupe(items: Iterable[str]) -> List[str]:
    """Remove duplicates while keeping first-seen order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def count_matches(pattern: re.Pattern, text: str) -> int:
    """Count every non-overlapping occurrence of a compiled pattern."""
    if not text:
        return 0
    return sum(1 for _ in pattern.finditer(text))
