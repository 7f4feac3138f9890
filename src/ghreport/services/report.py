"""Report Generation Service

Runs the profile-to-report pipeline for one user action:
1. Extract the account identifier from the input
2. Retrieve the account record and its repositories
3. Lay out and render the PDF

The first failing stage ends the run. The outcome is returned as a value
for the web or CLI layer to present; nothing is stored between runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ghreport.config.settings import get_settings
from ghreport.core.logging import get_logger, log_stage
from ghreport.errors import ExtractionError
from ghreport.fetch.profile_fetcher import GitHubClient, extract_username, fetch_profile
from ghreport.models import AggregateRecord, ArtifactSummary
from ghreport.pdf.render import build_report_pdf
from ghreport.result import Result, and_then, from_exception, map_result, success

logger = get_logger(__name__)

USER_ERROR_MESSAGE = "Error generating report"


class PipelineState(Enum):
    """Lifecycle of a single report run."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ReportOutcome:
    """What one pipeline run produced."""

    state: PipelineState = PipelineState.IDLE
    username: Optional[str] = None
    repositories: list[ArtifactSummary] = field(default_factory=list)
    pdf_bytes: Optional[bytes] = None
    filename: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def report_generated(self) -> bool:
        return self.state is PipelineState.COMPLETED

    @property
    def user_message(self) -> Optional[str]:
        """Message safe to show end users; details stay in the log."""
        if self.state is PipelineState.FAILED:
            return USER_ERROR_MESSAGE
        return None


def _extract(raw_input: Optional[str]) -> Result[str]:
    username = extract_username(raw_input)
    if username is None:
        logger.error("Username extraction failed for input {!r}", raw_input)
        return from_exception(ExtractionError("no account identifier in input"))
    return success(username)


def _retrieve(username: str, client: Optional[GitHubClient]) -> Result[AggregateRecord]:
    return log_stage(
        "Fetching GitHub profile",
        lambda: fetch_profile(username, client),
        username=username,
    )


def _render(record: AggregateRecord) -> Result[tuple[AggregateRecord, bytes]]:
    return log_stage(
        "Rendering report",
        lambda: map_result(success(record), lambda rec: (rec, build_report_pdf(rec))),
        username=record.login,
    )


def generate_report(
    raw_input: Optional[str], client: Optional[GitHubClient] = None
) -> ReportOutcome:
    """Run the whole pipeline for a profile URL or bare login.

    Args:
        raw_input: Profile URL (``https://github.com/<login>``) or login
        client: GitHub client to use (a fresh one if None)

    Returns:
        ReportOutcome in the COMPLETED or FAILED state
    """
    outcome = ReportOutcome(state=PipelineState.RUNNING)

    username_result = _extract(raw_input)
    outcome.username = username_result["value"]

    record_result = and_then(username_result, lambda name: _retrieve(name, client))
    rendered = and_then(record_result, _render)

    if not rendered["ok"]:
        outcome.state = PipelineState.FAILED
        outcome.error = rendered["error"]
        outcome.error_kind = rendered["kind"]
        logger.error(
            "{} (kind={}): {}", USER_ERROR_MESSAGE, outcome.error_kind, outcome.error
        )
        return outcome

    record, pdf_bytes = rendered["value"]
    outcome.state = PipelineState.COMPLETED
    outcome.repositories = list(record.repos)
    outcome.pdf_bytes = pdf_bytes
    outcome.filename = get_settings().report_filename
    logger.info(
        "Report generated for '{}' ({} repositories, {} bytes)",
        record.login,
        len(record.repos),
        len(pdf_bytes),
    )
    return outcome
