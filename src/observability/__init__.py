"""Observability — structured logging for the pricing core."""

from src.observability.logging_config import setup_logging

__all__ = [
    "setup_logging",
]
