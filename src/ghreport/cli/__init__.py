from .common import (
    ensure_parent_exists,
    resolve_output_path,
)

from .handlers import (
    handle_generate,
    handle_show_settings,
)

__all__ = [
    "ensure_parent_exists",
    "resolve_output_path",
    "handle_generate",
    "handle_show_settings",
]
