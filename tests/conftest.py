from __future__ import annotations

import pytest

from repo_content.domain.entities import DirectoryList, FileSet, RepositoryDescriptor
from repo_content.domain.exceptions import RepositoryNotFoundError


class ResolverStub:
    """Resolves every URL in ``known``; anything else is not found."""

    def __init__(self, *known: str, error: Exception | None = None) -> None:
        self.known = set(known)
        self.error = error
        self.calls: list[str] = []

    async def get_repository(self, repo_url: str) -> RepositoryDescriptor:
        self.calls.append(repo_url)
        if self.error is not None:
            raise self.error
        if repo_url not in self.known:
            raise RepositoryNotFoundError("repository not found")
        return RepositoryDescriptor(repo=repo_url, username="bot", password="s3cret")


class ConnectionStub:
    def __init__(
        self,
        files: FileSet | None = None,
        directories: DirectoryList | None = None,
        request_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.files = files or {}
        self.directories = directories or []
        self.request_error = request_error
        self.close_error = close_error
        self.requests: list[tuple] = []
        self.close_calls = 0

    async def get_files(
        self, repo: RepositoryDescriptor, revision: str, pattern: str
    ) -> FileSet:
        self.requests.append(("files", repo.repo, revision, pattern))
        if self.request_error is not None:
            raise self.request_error
        return self.files

    async def get_directories(
        self, repo: RepositoryDescriptor, revision: str
    ) -> DirectoryList:
        self.requests.append(("directories", repo.repo, revision))
        if self.request_error is not None:
            raise self.request_error
        return self.directories

    async def close(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class ConnectorStub:
    """Hands out fresh ConnectionStubs and records every one of them."""

    def __init__(self, error: Exception | None = None, **connection_kwargs) -> None:
        self.error = error
        self.connection_kwargs = connection_kwargs
        self.attempts = 0
        self.connections: list[ConnectionStub] = []

    async def new_connection(self) -> ConnectionStub:
        self.attempts += 1
        if self.error is not None:
            raise self.error
        conn = ConnectionStub(**self.connection_kwargs)
        self.connections.append(conn)
        return conn


REPO_URL = "https://example.com/repo.git"


@pytest.fixture
def resolver() -> ResolverStub:
    return ResolverStub(REPO_URL)


@pytest.fixture
def repo_url() -> str:
    return REPO_URL


@pytest.fixture
def make_resolver() -> type[ResolverStub]:
    return ResolverStub


@pytest.fixture
def make_connector() -> type[ConnectorStub]:
    return ConnectorStub
