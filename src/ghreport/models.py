"""Validated GitHub payload types.

Responses from the GitHub REST API are parsed into these models at the
retrieval boundary; a payload that does not validate is a shape failure.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountProfile(BaseModel):
    """Public account record from ``GET /users/{login}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(..., min_length=1, description="Account identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    public_repos: Optional[int] = Field(default=None, ge=0)
    followers: Optional[int] = Field(default=None, ge=0)
    following: Optional[int] = Field(default=None, ge=0)


class ArtifactSummary(BaseModel):
    """One repository from ``GET /users/{login}/repos``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0


class AggregateRecord(BaseModel):
    """An account together with its repositories, in API order.

    ``repos`` may be empty but is never absent.
    """

    model_config = ConfigDict(frozen=True)

    profile: AccountProfile
    repos: list[ArtifactSummary]

    @property
    def login(self) -> str:
        return self.profile.login
