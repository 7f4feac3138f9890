"""
Core functionality for the GitHub profile report.

Logging setup and helpers shared by the fetch, report and web layers.
"""

from .logging import get_logger, log_stage, setup_logging

__all__ = ["get_logger", "log_stage", "setup_logging"]
