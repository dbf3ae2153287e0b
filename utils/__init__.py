"""
Shared utilities
Error log setup and helpers
"""

from .error_log import setup_error_logging, get_logger, log_error

__all__ = ['setup_error_logging', 'get_logger', 'log_error']
