"""Network utilities for HTTP requests."""

from .network import (
    DEFAULT_CONFIG,
    HttpConfig,
    fetch_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "HttpConfig",
    "fetch_json",
]
