"""Pure summary functions for the profile report.

Each function takes the repository sequence of an AggregateRecord and
returns display text. Items may be ``ArtifactSummary`` models or raw API
mappings with the same keys. A missing or non-list input yields
``NO_DATA`` rather than an error.
"""

from collections.abc import Mapping
from typing import Any, Optional, Sequence

NO_DATA = "No data available."
NO_TECH_STACK = "No tech stack information available."
NO_REPO_IMPACT = "No repository impact information available."
UNKNOWN_LANGUAGE = "Unknown"


def _field(repo: Any, key: str, default: Any = None) -> Any:
    if isinstance(repo, Mapping):
        return repo.get(key, default)
    return getattr(repo, key, default)


def _is_sequence(repos: Any) -> bool:
    return isinstance(repos, (list, tuple))


def evaluate_tech_stack(repos: Optional[Sequence[Any]]) -> str:
    """Count repositories per language in first-seen order.

    >>> evaluate_tech_stack([{"language": "Go"}, {"language": None}, {"language": "Go"}])
    'Go: 2 repo(s)\\nUnknown: 1 repo(s)'
    """
    if not _is_sequence(repos):
        return NO_DATA

    # dicts keep insertion order, which is the first-seen order
    language_count: dict[str, int] = {}
    for repo in repos:
        language = _field(repo, "language") or UNKNOWN_LANGUAGE
        language_count[language] = language_count.get(language, 0) + 1

    tech_stack = "\n".join(
        f"{language}: {count} repo(s)" for language, count in language_count.items()
    )
    return tech_stack or NO_TECH_STACK


def evaluate_experience(repos: Optional[Sequence[Any]]) -> str:
    if not _is_sequence(repos):
        return NO_DATA
    return f"Number of repositories: {len(repos)}"


def evaluate_repo_impact(repos: Optional[Sequence[Any]]) -> str:
    """One ``name: N stars, M forks`` line per repository, in input order."""
    if not _is_sequence(repos):
        return NO_DATA

    repo_impact = "\n".join(
        f"{_field(repo, 'name')}: {_field(repo, 'stargazers_count', 0)} stars, "
        f"{_field(repo, 'forks_count', 0)} forks"
        for repo in repos
    )
    return repo_impact or NO_REPO_IMPACT
