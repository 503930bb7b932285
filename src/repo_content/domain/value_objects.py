"""Value objects: repository URL normalisation used for lookups."""

from __future__ import annotations


def normalize_repo_url(url: str) -> str:
    """Return the comparison form of a repository URL.

    ``https://Example.com/Org/Repo.git/`` and ``https://example.com/org/repo``
    normalise to the same key.  The original URL is never rewritten in a
    descriptor; this form is only used to match registrations.
    """
    normalized = url.strip().lower()
    normalized = normalized.rstrip("/")
    if normalized.endswith(".git"):
        normalized = normalized[: -len(".git")]
    return normalized


_SEGMENT_BOUNDARIES = "/:"


def normalize_url_prefix(prefix: str) -> str:
    """Comparison form of a credential prefix.  Trailing ``/`` and ``.git`` are kept."""
    return prefix.strip().lower()


def url_has_prefix(url: str, prefix: str) -> bool:
    """True when *prefix* covers *url* up to a host or path boundary.

    ``https://example.com`` covers ``https://example.com/org/repo`` but not
    ``https://example.com.evil.io/repo``; ``https://example.com/team`` does
    not cover ``https://example.com/team-evil/app``.
    """
    norm_url = normalize_repo_url(url)
    norm_prefix = normalize_url_prefix(prefix)
    if not norm_prefix or not norm_url.startswith(norm_prefix):
        return False
    if norm_prefix[-1] in _SEGMENT_BOUNDARIES or len(norm_url) == len(norm_prefix):
        return True
    return norm_url[len(norm_prefix)] in _SEGMENT_BOUNDARIES
