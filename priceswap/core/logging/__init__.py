"""Structured JSON logging for feed fetches, table builds and swaps."""

from priceswap.core.logging.config import LogConfig
from priceswap.core.logging.logger import StructuredLogger, configure_logging, log_context, logger

__all__ = ["LogConfig", "StructuredLogger", "configure_logging", "log_context", "logger"]
