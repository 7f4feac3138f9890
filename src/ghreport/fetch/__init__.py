"""Profile fetching from the GitHub REST API."""

from ghreport.fetch.profile_fetcher import (
    GitHubClient,
    ProfileFetcher,
    extract_username,
    fetch_profile,
)

__all__ = [
    "GitHubClient",
    "ProfileFetcher",
    "extract_username",
    "fetch_profile",
]
