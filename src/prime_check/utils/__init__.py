"""Utility modules for prime_check."""

from prime_check.utils.logging import setup_logger

__all__ = ["setup_logger"]
