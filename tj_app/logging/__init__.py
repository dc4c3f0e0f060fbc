"""
Logging configuration and utilities for the trade analytics engine.
"""
from .config import configure_logging, get_logger, get_metrics_logger

__all__ = ["configure_logging", "get_logger", "get_metrics_logger"]
