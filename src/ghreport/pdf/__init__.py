"""PDF layout and rendering for the profile report."""

from .layout import PAGE_SIZE, TextBlock, plan_report_layout
from .render import build_report_pdf, render_report_pdf

__all__ = [
    "PAGE_SIZE",
    "TextBlock",
    "build_report_pdf",
    "plan_report_layout",
    "render_report_pdf",
]
