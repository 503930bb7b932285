"""Content backend port, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_content.domain.entities import DirectoryList, FileSet, RepositoryDescriptor


class ContentBackendConnection(Protocol):
    """A transient connection to a content-serving backend."""

    async def get_files(
        self, repo: RepositoryDescriptor, revision: str, pattern: str
    ) -> FileSet:
        """Return the files matching *pattern* at *revision*."""
        ...

    async def get_directories(
        self, repo: RepositoryDescriptor, revision: str
    ) -> DirectoryList:
        """Return the directories present at *revision*."""
        ...

    async def close(self) -> None:
        """Release the connection.  Must be idempotent."""
        ...


class ContentBackendConnector(Protocol):
    """Factory for :class:`ContentBackendConnection` objects."""

    async def new_connection(self) -> ContentBackendConnection:
        """Open a new connection owned by the caller."""
        ...
