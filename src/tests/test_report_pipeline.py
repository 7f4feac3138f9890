"""End-to-end tests for the profile-to-report pipeline."""

import pytest

from conftest import API, NOT_FOUND, OCTOCAT_REPOS, FakeResponse
from ghreport.errors import PDFError
from ghreport.services import report as report_service
from ghreport.services.report import (
    USER_ERROR_MESSAGE,
    PipelineState,
    ReportOutcome,
    generate_report,
)


@pytest.fixture
def no_render(monkeypatch):
    """Fail the test if the pipeline tries to render a document."""
    calls = []

    def fake_build(record):
        calls.append(record)
        raise AssertionError("document generation must not be attempted")

    monkeypatch.setattr(report_service, "build_report_pdf", fake_build)
    return calls


def test_new_outcome_is_idle():
    outcome = ReportOutcome()

    assert outcome.state is PipelineState.IDLE
    assert outcome.report_generated is False
    assert outcome.user_message is None


def test_successful_run(make_client, octocat_routes):
    client, session = make_client(octocat_routes)

    outcome = generate_report("https://host/octocat", client=client)

    assert outcome.state is PipelineState.COMPLETED
    assert outcome.report_generated is True
    assert outcome.username == "octocat"
    assert [r.name for r in outcome.repositories] == [r["name"] for r in OCTOCAT_REPOS]
    assert outcome.pdf_bytes.startswith(b"%PDF")
    assert outcome.filename == "GitHub_Profile_Report.pdf"
    assert outcome.error is None
    assert outcome.user_message is None
    assert len(session.calls) == 2


def test_filename_follows_settings(make_client, octocat_routes):
    from ghreport.config.settings import get_settings

    get_settings().report_filename = "octocat.pdf"
    client, _ = make_client(octocat_routes)

    assert generate_report("octocat", client=client).filename == "octocat.pdf"


def test_not_found_profile_fails_without_rendering(make_client, no_render):
    client, session = make_client({f"{API}/users/ghost": FakeResponse(NOT_FOUND)})

    outcome = generate_report("https://github.com/ghost", client=client)

    assert outcome.state is PipelineState.FAILED
    assert outcome.report_generated is False
    assert outcome.error_kind == "shape"
    assert outcome.pdf_bytes is None
    assert outcome.repositories == []
    assert outcome.user_message == USER_ERROR_MESSAGE
    assert no_render == []
    assert len(session.calls) == 1


def test_failed_run_is_logged_as_failed(make_client, no_render, captured_logs):
    client, _ = make_client({f"{API}/users/ghost": FakeResponse(NOT_FOUND)})

    generate_report("ghost", client=client)

    assert not any("completed" in m for m in captured_logs)
    assert any(
        m.startswith("ERROR Fetching GitHub profile [username=ghost] failed")
        and "kind=shape" in m
        for m in captured_logs
    )
    assert not any("Rendering report" in m for m in captured_logs)


def test_http_404_fails_as_transport(make_client, no_render):
    client, _ = make_client(
        {f"{API}/users/ghost": FakeResponse(NOT_FOUND, status_code=404)}
    )

    outcome = generate_report("ghost", client=client)

    assert outcome.report_generated is False
    assert outcome.error_kind == "transport"
    assert no_render == []


@pytest.mark.parametrize("raw_input", ["", "///", "https://github.com/", None])
def test_extraction_failure_makes_no_requests(make_client, no_render, raw_input):
    client, session = make_client({})

    outcome = generate_report(raw_input, client=client)

    assert outcome.state is PipelineState.FAILED
    assert outcome.error_kind == "extraction"
    assert outcome.username is None
    assert session.calls == []
    assert no_render == []


def test_render_failure_is_reported(make_client, octocat_routes, monkeypatch):
    def broken_build(record):
        raise PDFError("font missing")

    monkeypatch.setattr(report_service, "build_report_pdf", broken_build)
    client, _ = make_client(octocat_routes)

    outcome = generate_report("octocat", client=client)

    assert outcome.state is PipelineState.FAILED
    assert outcome.error_kind == "render"
    assert "font missing" in outcome.error
    assert outcome.pdf_bytes is None
    assert outcome.repositories == []


def test_runs_are_independent(make_client, octocat_routes):
    good_client, _ = make_client(octocat_routes)
    bad_client, _ = make_client({})

    first = generate_report("octocat", client=good_client)
    second = generate_report("octocat", client=bad_client)

    assert first.report_generated is True
    assert second.report_generated is False
    assert first.pdf_bytes is not None


def test_layout_failure_is_a_render_failure(make_client, octocat_routes, monkeypatch):
    from ghreport.pdf import render

    def broken_layout(record):
        raise ValueError("cannot measure text")

    monkeypatch.setattr(render, "plan_report_layout", broken_layout)
    client, _ = make_client(octocat_routes)

    outcome = generate_report("octocat", client=client)

    assert outcome.state is PipelineState.FAILED
    assert outcome.error_kind == "render"
    assert "cannot measure text" in outcome.error
