"""Profile retrieval from the GitHub REST API.

Retrieval runs in two dependent phases:
1. Account record (``GET /users/{login}``)
2. Repository list (``GET /users/{login}/repos``)

Phase 2 is only attempted after phase 1 succeeded. A failure in either phase
ends retrieval; no partial record is returned.
"""

from typing import Any, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ghreport.config.settings import get_settings
from ghreport.core.logging import get_logger
from ghreport.errors import ReportError, ShapeError
from ghreport.models import AccountProfile, AggregateRecord, ArtifactSummary
from ghreport.net.network import HttpConfig, fetch_json
from ghreport.result import Result, and_then, from_exception, success

logger = get_logger(__name__)


def extract_username(raw: Optional[str]) -> Optional[str]:
    """Extract the account identifier from a profile URL or bare login.

    Only the final ``/``-separated segment is considered, so both
    ``"octocat"`` and ``"https://github.com/octocat"`` yield ``"octocat"``.

    Returns:
        The identifier, or None when the input is empty or its final
        segment is empty (e.g. ``"///"`` or a trailing slash)

    Examples:
        >>> extract_username("https://github.com/octocat")
        'octocat'
        >>> extract_username("///") is None
        True
    """
    if not raw:
        return None
    username = raw.strip().split("/")[-1]
    return username or None


class GitHubClient:
    """Thin client for the two unauthenticated endpoints the report needs."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        config: Optional[HttpConfig] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root; defaults to ``settings.api_base_url``
            session: Session used for requests (one per client if None)
            config: Request configuration; defaults built from settings
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.config = config or HttpConfig(
            timeout=settings.http_timeout, user_agent=settings.user_agent
        )

    def _url(self, username: str, suffix: str = "") -> str:
        return f"{self.base_url}/users/{quote(username, safe='')}{suffix}"

    def _get(self, url: str) -> Any:
        logger.debug("GET {}", url)
        return fetch_json(url, session=self.session, config=self.config)

    def get_user(self, username: str) -> AccountProfile:
        """Fetch the account record.

        Raises:
            NetworkError: On transport failure
            ShapeError: If the body is not an object with a non-empty ``login``
        """
        payload = self._get(self._url(username))
        if not isinstance(payload, dict) or not payload.get("login"):
            message = payload.get("message") if isinstance(payload, dict) else None
            raise ShapeError(
                f"profile response for '{username}' has no login"
                + (f" ({message})" if message else "")
            )
        try:
            return AccountProfile.model_validate(payload)
        except ValidationError as exc:
            raise ShapeError(f"invalid profile for '{username}': {exc}") from exc

    def get_repos(self, username: str) -> list[ArtifactSummary]:
        """Fetch the repository list in API order.

        Raises:
            NetworkError: On transport failure
            ShapeError: If the body is not a list of repository objects
        """
        payload = self._get(self._url(username, "/repos"))
        if not isinstance(payload, list):
            raise ShapeError(
                f"repositories response for '{username}' is "
                f"{type(payload).__name__}, expected list"
            )
        try:
            return [ArtifactSummary.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise ShapeError(f"invalid repository in list for '{username}': {exc}") from exc

    def close(self) -> None:
        self.session.close()


class ProfileFetcher:
    """Orchestrates profile retrieval with explicit phase separation."""

    def __init__(self, client: GitHubClient):
        self.client = client

    def fetch(self, username: str) -> Result[AggregateRecord]:
        """Run both retrieval phases for ``username``.

        Returns:
            Result containing the AggregateRecord or the first error
        """
        # Phase 1: Account record
        profile_result = self._fetch_profile(username)

        # Phase 2: Repository list, skipped when phase 1 failed
        return and_then(
            profile_result, lambda profile: self._attach_repos(username, profile)
        )

    def _fetch_profile(self, username: str) -> Result[AccountProfile]:
        try:
            return success(self.client.get_user(username))
        except ReportError as exc:
            logger.error("Error fetching GitHub profile '{}': {}", username, exc)
            return from_exception(exc)

    def _attach_repos(
        self, username: str, profile: AccountProfile
    ) -> Result[AggregateRecord]:
        try:
            repos = self.client.get_repos(username)
        except ReportError as exc:
            logger.error("Error fetching repositories for '{}': {}", username, exc)
            return from_exception(exc)

        logger.info("Fetched {} repositories for '{}'", len(repos), profile.login)
        return success(AggregateRecord(profile=profile, repos=repos))


def fetch_profile(
    username: str, client: Optional[GitHubClient] = None
) -> Result[AggregateRecord]:
    """Fetch the aggregate record for ``username``.

    This is the main entry point for retrieval.

    Example:
        result = fetch_profile("octocat")
        if result['ok']:
            record = result['value']
            print(f"{record.login}: {len(record.repos)} repos")
        else:
            print(f"Error: {result['error']}")
    """
    owns_client = client is None
    if client is None:
        client = GitHubClient()
    try:
        return ProfileFetcher(client).fetch(username)
    finally:
        if owns_client:
            client.close()
