"""Repository content use case: the facade in front of the resolver and backend.

Every call runs the same linear pipeline: resolve the repository URL,
open one backend connection, send one request, close the connection,
return.  The service holds no mutable state, so one instance can be shared
by any number of concurrent callers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from repo_content.domain.entities import DirectoryList, FileSet, RepositoryDescriptor
from repo_content.domain.exceptions import (
    BackendConnectionError,
    BackendRequestError,
    ResolutionError,
)
from repo_content.domain.ports.content_backend import (
    ContentBackendConnection,
    ContentBackendConnector,
)
from repo_content.domain.ports.repository_resolver import RepositoryResolver

logger = logging.getLogger(__name__)


class RepoContentService:
    """Fetches files and directory listings from a repository at a revision.

    Parameters
    ----------
    resolver:
        Turns a repository URL into a credentialed descriptor.  Only
        ``get_repository`` is required.
    connector:
        Opens short-lived connections to the content backend.
    """

    def __init__(
        self,
        resolver: RepositoryResolver,
        connector: ContentBackendConnector,
    ) -> None:
        if not isinstance(resolver, RepositoryResolver):
            raise TypeError(
                f"{type(resolver).__name__} does not provide get_repository(repo_url)"
            )
        self._resolver = resolver
        self._connector = connector

    # ── Public entry points ─────────────────────────────────────────────

    async def get_files(self, repo_url: str, revision: str, pattern: str) -> FileSet:
        """Return the content of files (not directories) matching *pattern*."""
        operation = "get_files"
        repo = await self._resolve(operation, repo_url)

        async with self._connection(operation, repo_url) as conn:
            logger.debug(
                "Requesting files %r at %r from %s", pattern, revision, repo_url
            )
            try:
                return await conn.get_files(repo, revision, pattern)
            except Exception as exc:
                raise BackendRequestError(operation, repo_url, exc) from exc

    async def get_directories(self, repo_url: str, revision: str) -> DirectoryList:
        """Return the directories (not files) present at *revision*."""
        operation = "get_directories"
        repo = await self._resolve(operation, repo_url)

        async with self._connection(operation, repo_url) as conn:
            logger.debug("Requesting directories at %r from %s", revision, repo_url)
            try:
                return await conn.get_directories(repo, revision)
            except Exception as exc:
                raise BackendRequestError(operation, repo_url, exc) from exc

    # ── Pipeline steps ──────────────────────────────────────────────────

    async def _resolve(self, operation: str, repo_url: str) -> RepositoryDescriptor:
        try:
            return await self._resolver.get_repository(repo_url)
        except Exception as exc:
            raise ResolutionError(operation, repo_url, exc) from exc

    @asynccontextmanager
    async def _connection(
        self, operation: str, repo_url: str
    ) -> AsyncIterator[ContentBackendConnection]:
        """Open a backend connection and close it on every exit path."""
        try:
            conn = await self._connector.new_connection()
        except Exception as exc:
            raise BackendConnectionError(operation, repo_url, exc) from exc

        try:
            yield conn
        finally:
            await _close_quietly(conn, operation, repo_url)


async def _close_quietly(
    conn: ContentBackendConnection, operation: str, repo_url: str
) -> None:
    """Close *conn*; a failure is logged and never masks the call's outcome."""
    try:
        await conn.close()
    except Exception:
        logger.warning(
            "Failed to close content backend connection after %s for %s",
            operation,
            repo_url,
            exc_info=True,
        )
