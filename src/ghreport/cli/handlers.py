"""CLI command handlers.

Each handler is a plain function that takes parameters and returns a Result,
so it can be tested without a click context.
"""

from pathlib import Path
from typing import Optional

from ghreport.cli.common import ensure_parent_exists, resolve_output_path
from ghreport.config.settings import get_settings
from ghreport.fetch.profile_fetcher import GitHubClient
from ghreport.result import Result, failure, success, try_operation
from ghreport.services.report import generate_report


def handle_generate(
    profile_url: str,
    output: Optional[str | Path] = None,
    client: Optional[GitHubClient] = None,
) -> Result[dict]:
    """Handle the report generation command.

    Args:
        profile_url: Profile URL or bare login
        output: Destination PDF path (settings.report_filename in the
            current directory if None)
        client: GitHub client override

    Returns:
        Result containing the output path and repository count
    """
    outcome = generate_report(profile_url, client=client)
    if not outcome.report_generated:
        return failure(
            outcome.error or "report generation failed", outcome.error_kind or "error"
        )

    destination = resolve_output_path(output or Path.cwd() / outcome.filename)

    def write_pdf():
        ensure_parent_exists(destination)
        destination.write_bytes(outcome.pdf_bytes)
        return {
            "status": "completed",
            "username": outcome.username,
            "output_path": str(destination),
            "repositories": len(outcome.repositories),
        }

    return try_operation(write_pdf)


def handle_show_settings() -> Result[dict]:
    """Return the effective settings as a plain dict."""
    return success(get_settings().model_dump(mode="json"))
