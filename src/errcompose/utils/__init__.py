"""
Utility helpers shared across errcompose packages.
"""

from .logging import configure_logging, describe_type, get_logger

__all__ = ["configure_logging", "describe_type", "get_logger"]
