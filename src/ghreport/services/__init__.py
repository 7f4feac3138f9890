"""Service layer: the profile-to-report pipeline."""

from .report import PipelineState, ReportOutcome, generate_report

__all__ = ["PipelineState", "ReportOutcome", "generate_report"]
