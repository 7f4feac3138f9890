"""Report text summaries."""

from .summaries import (
    NO_DATA,
    NO_REPO_IMPACT,
    NO_TECH_STACK,
    evaluate_experience,
    evaluate_repo_impact,
    evaluate_tech_stack,
)

__all__ = [
    "NO_DATA",
    "NO_REPO_IMPACT",
    "NO_TECH_STACK",
    "evaluate_experience",
    "evaluate_repo_impact",
    "evaluate_tech_stack",
]
