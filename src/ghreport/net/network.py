"""HTTP helpers for read-only JSON requests.

Every request is a single attempt: there is no retry, backoff or rate-limit
handling. Any transport problem (connection, DNS, timeout, error status,
undecodable body) is raised as ``NetworkError``.
"""

from dataclasses import dataclass
from typing import Any, Optional

import requests

from ghreport.errors import NetworkError


@dataclass
class HttpConfig:
    """Configuration for a single HTTP request."""

    timeout: float = 30.0  # seconds
    user_agent: str = "github-profile-report/1.0"
    accept: str = "application/json"

    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}


# Default configuration
DEFAULT_CONFIG = HttpConfig()


def fetch_json(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    config: Optional[HttpConfig] = None,
) -> Any:
    """GET ``url`` and decode the JSON body.

    Args:
        url: URL to fetch
        session: Session to issue the request with (module-level
            ``requests.get`` if None)
        config: Request configuration (uses default if None)

    Returns:
        Decoded JSON value (dict, list or scalar)

    Raises:
        NetworkError: On any transport failure or non-2xx status
    """
    if config is None:
        config = DEFAULT_CONFIG

    get = session.get if session is not None else requests.get

    try:
        response = get(url, headers=config.headers(), timeout=config.timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as error:
        status = error.response.status_code if error.response is not None else "?"
        raise NetworkError(f"GET {url} returned HTTP {status}") from error
    except requests.exceptions.RequestException as error:
        raise NetworkError(f"GET {url} failed: {error}") from error

    try:
        return response.json()
    except ValueError as error:
        raise NetworkError(f"GET {url} returned invalid JSON: {error}") from error
