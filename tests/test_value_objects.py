import pytest

from repo_content.domain.value_objects import normalize_repo_url, url_has_prefix


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/org/repo",
        "https://Example.com/Org/Repo.git",
        "  https://example.com/org/repo/  ",
        "https://example.com/org/repo.git/",
    ],
)
def test_normalize_repo_url_equivalents(url):
    assert normalize_repo_url(url) == "https://example.com/org/repo"


def test_url_has_prefix():
    assert url_has_prefix("https://example.com/org/repo.git", "https://example.com/org")
    assert not url_has_prefix("https://example.com/other", "https://example.com/org")


def test_empty_prefix_matches_nothing():
    assert not url_has_prefix("https://example.com/org/repo", "")


@pytest.mark.parametrize(
    "url, prefix",
    [
        ("https://example.com.attacker.io/x/repo.git", "https://example.com/"),
        ("https://example.comevil.io/repo", "https://example.com"),
        ("https://example.com/team-evil/app.git", "https://example.com/team/"),
        ("https://example.com/team-evil/app.git", "https://example.com/team"),
    ],
)
def test_prefix_stops_at_host_and_path_boundaries(url, prefix):
    assert not url_has_prefix(url, prefix)


def test_prefix_keeps_git_suffix():
    assert not url_has_prefix("https://example.com/org/repo", "https://example.com/org/repo.git")
    assert url_has_prefix("git@example.com:org/app.git", "git@example.com:")
