"""
Logging utilities for the voice to-do backend.

Provides standardized logger configuration following privacy rules.

CRITICAL SECURITY RULES:
- NEVER log raw audio bytes or uploaded file contents
- NEVER log ElevenLabs or Google API keys
- NEVER log the full to-do list at INFO level (user content)

Acceptable logging:
- High-level events (e.g., "TodoActionAgent invoked", "Transcription completed")
- Non-sensitive metadata (e.g., content type, file size, action kind)
- Latency of external calls
- Upstream status codes and sanitized error bodies
"""

import logging
from typing import Optional

from backend.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
