"""
Logging configuration and utilities for the STREACS data layer.
"""
from .config import configure_logging, get_loader_logger, get_logger, log_source_load

__all__ = ["configure_logging", "get_logger", "get_loader_logger", "log_source_load"]
