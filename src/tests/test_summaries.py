"""Tests for the report text summaries."""

import pytest

from ghreport.models import ArtifactSummary
from ghreport.report.summaries import (
    NO_DATA,
    NO_REPO_IMPACT,
    NO_TECH_STACK,
    evaluate_experience,
    evaluate_repo_impact,
    evaluate_tech_stack,
)

ALL_SUMMARIES = [evaluate_tech_stack, evaluate_experience, evaluate_repo_impact]


def repo(name="repo", language=None, stars=0, forks=0):
    return ArtifactSummary(
        name=name, language=language, stargazers_count=stars, forks_count=forks
    )


class TestTechStack:
    def test_first_seen_order_with_unknown(self):
        repos = [{"language": "Go"}, {"language": None}, {"language": "Go"}]

        assert evaluate_tech_stack(repos) == "Go: 2 repo(s)\nUnknown: 1 repo(s)"

    def test_order_is_not_sorted(self):
        repos = [repo(language="Rust"), repo(language="C"), repo(language="Rust")]

        assert evaluate_tech_stack(repos).splitlines() == [
            "Rust: 2 repo(s)",
            "C: 1 repo(s)",
        ]

    def test_empty_language_string_counts_as_unknown(self):
        assert evaluate_tech_stack([repo(language="")]) == "Unknown: 1 repo(s)"

    def test_empty_list(self):
        assert evaluate_tech_stack([]) == NO_TECH_STACK

    def test_total_counts_survive_reordering(self):
        repos = [repo(language="Go"), repo(), repo(language="Go")]
        reordered = [repos[1], repos[0], repos[2]]

        assert sorted(evaluate_tech_stack(repos).splitlines()) == sorted(
            evaluate_tech_stack(reordered).splitlines()
        )


class TestExperience:
    def test_empty(self):
        assert evaluate_experience([]) == "Number of repositories: 0"

    def test_counts_items(self):
        assert evaluate_experience([repo(), repo(), repo()]) == "Number of repositories: 3"


class TestRepoImpact:
    def test_lines_in_input_order(self):
        repos = [
            {"name": "a", "stargazers_count": 3, "forks_count": 1},
            {"name": "b", "stargazers_count": 0, "forks_count": 0},
        ]

        assert evaluate_repo_impact(repos) == "a: 3 stars, 1 forks\nb: 0 stars, 0 forks"

    def test_models_and_mappings_render_the_same(self):
        as_model = [repo("a", stars=3, forks=1)]
        as_dict = [{"name": "a", "stargazers_count": 3, "forks_count": 1}]

        assert evaluate_repo_impact(as_model) == evaluate_repo_impact(as_dict)

    def test_empty_list(self):
        assert evaluate_repo_impact([]) == NO_REPO_IMPACT


@pytest.mark.parametrize("summary", ALL_SUMMARIES)
@pytest.mark.parametrize("bad_input", [None, "not a list", 42, {"name": "a"}])
def test_non_sequence_input_returns_no_data(summary, bad_input):
    assert summary(bad_input) == NO_DATA


@pytest.mark.parametrize("summary", ALL_SUMMARIES)
def test_summaries_do_not_mutate_input(summary):
    repos = [{"name": "a", "language": None, "stargazers_count": 1, "forks_count": 2}]
    snapshot = [dict(r) for r in repos]

    summary(repos)

    assert repos == snapshot
