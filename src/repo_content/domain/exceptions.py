"""Domain exception hierarchy.

Collaborators raise the lower-level errors (``RepositoryNotFoundError``,
``RepoServerError``).  The facade wraps whatever its collaborators raise in
one of the three ``ContentRetrievalError`` subclasses so callers can tell
"repository unknown" from "backend unreachable" from "backend rejected the
query".
"""

from __future__ import annotations


class RepoContentError(Exception):
    """Base exception for the entire package."""


# ── Collaborator errors ─────────────────────────────────────────────────────


class RepositoryNotFoundError(RepoContentError):
    """No registered repository or credential template matches the URL."""


class RepoServerError(RepoContentError):
    """The repo-server could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# ── Facade errors ───────────────────────────────────────────────────────────


class ContentRetrievalError(RepoContentError):
    """A facade call failed; ``__cause__`` holds the underlying error."""

    kind = "content retrieval failed"

    def __init__(self, operation: str, repo_url: str, cause: BaseException) -> None:
        super().__init__(f"{operation}({repo_url!r}): {self.kind}: {cause}")
        self.operation = operation
        self.repo_url = repo_url


class ResolutionError(ContentRetrievalError):
    """The repository URL could not be resolved to a descriptor."""

    kind = "error in get_repository"


class BackendConnectionError(ContentRetrievalError):
    """A connection to the content backend could not be acquired."""

    kind = "could not connect to content backend"


class BackendRequestError(ContentRetrievalError):
    """The content backend rejected or failed the query."""

    kind = "content backend request failed"
