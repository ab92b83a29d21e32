"""Logging configuration module for idcn."""

from idcn.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
