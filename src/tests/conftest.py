"""Shared fixtures: a fake requests session and canned GitHub payloads."""

import os

import pytest
import requests
from loguru import logger

import ghreport.config.settings as settings_module
from ghreport.fetch.profile_fetcher import GitHubClient

API = "https://api.example.test"

OCTOCAT_PROFILE = {
    "login": "octocat",
    "name": "The Octocat",
    "public_repos": 2,
    "followers": 100,
    "following": 9,
    "type": "User",
}

OCTOCAT_REPOS = [
    {
        "name": "hello-world",
        "language": "Python",
        "stargazers_count": 3,
        "forks_count": 1,
        "private": False,
    },
    {
        "name": "spoon-knife",
        "language": None,
        "stargazers_count": 0,
        "forks_count": 0,
    },
]

NOT_FOUND = {
    "message": "Not Found",
    "documentation_url": "https://docs.github.com/rest",
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body=None):
        self.payload = payload
        self.status_code = status_code
        self.body = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(
                f"{self.status_code} Error", response=self
            )

    def json(self):
        if self.body is not None:
            raise ValueError(f"Expecting value: {self.body!r}")
        return self.payload


class FakeSession:
    """Records requested URLs and replies from a url -> response table."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        response = self.routes.get(url)
        if response is None:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test default settings, unaffected by the environment."""
    for key in list(os.environ):
        if key.startswith("GHR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        settings_module, "settings", settings_module.ReportSettings(_env_file=None)
    )
    yield


@pytest.fixture
def captured_logs():
    """Collect "LEVEL message" strings logged while the test runs."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.rstrip("\n")),
        format="{level} {message}",
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_client():
    """Build a GitHubClient around a FakeSession with the given routes."""

    def _make(routes):
        session = FakeSession(routes)
        return GitHubClient(API, session=session), session

    return _make


@pytest.fixture
def octocat_routes():
    return {
        f"{API}/users/octocat": FakeResponse(OCTOCAT_PROFILE),
        f"{API}/users/octocat/repos": FakeResponse(OCTOCAT_REPOS),
    }
