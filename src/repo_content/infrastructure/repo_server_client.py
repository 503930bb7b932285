"""Repo-server HTTP adapter: implements the ContentBackendConnector port."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from repo_content.domain.entities import DirectoryList, FileSet, RepositoryDescriptor
from repo_content.domain.exceptions import RepoServerError
from repo_content.infrastructure.repo_server_schemas import (
    GetDirectoriesRequest,
    GetDirectoriesResponse,
    GetFilesRequest,
    GetFilesResponse,
    RepositoryPayload,
)

logger = logging.getLogger(__name__)

_FILES_ENDPOINT = "/api/v1/repository/files"
_DIRECTORIES_ENDPOINT = "/api/v1/repository/directories"

_ResponseT = TypeVar("_ResponseT", bound=BaseModel)


class RepoServerClientset:
    """Concrete connector that hands out one HTTP client per connection."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 60.0,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": "repo-content/1.0",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def new_connection(self) -> RepoServerConnection:
        if not self._base_url:
            raise RepoServerError("repo-server URL is not configured")
        client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return RepoServerConnection(client)


class RepoServerConnection:
    """A single repo-server session.  ``close`` may be called any number of times."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client
        self._closed = False

    async def get_files(
        self, repo: RepositoryDescriptor, revision: str, pattern: str
    ) -> FileSet:
        """POST /api/v1/repository/files → {path: bytes}."""
        body = GetFilesRequest(
            repo=RepositoryPayload.from_descriptor(repo),
            revision=revision,
            pattern=pattern,
        )
        resp = await self._post(_FILES_ENDPOINT, body, GetFilesResponse)
        return dict(resp.items)

    async def get_directories(
        self, repo: RepositoryDescriptor, revision: str
    ) -> DirectoryList:
        """POST /api/v1/repository/directories → [path]."""
        body = GetDirectoriesRequest(
            repo=RepositoryPayload.from_descriptor(repo),
            revision=revision,
        )
        resp = await self._post(_DIRECTORIES_ENDPOINT, body, GetDirectoriesResponse)
        return list(resp.items)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._client.aclose()

    async def _post(
        self,
        endpoint: str,
        body: BaseModel,
        response_model: type[_ResponseT],
    ) -> _ResponseT:
        """Perform a repo-server POST with error translation."""
        if self._closed:
            raise RepoServerError("connection is closed")

        try:
            resp = await self._client.post(endpoint, json=body.model_dump(mode="json"))
        except httpx.HTTPError as exc:
            raise RepoServerError(
                f"Network error calling repo-server {endpoint}: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise RepoServerError(
                f"repo-server returned HTTP {resp.status_code} for {endpoint}: "
                f"{_error_detail(resp)}",
                status_code=resp.status_code,
            )

        try:
            return response_model.model_validate_json(resp.content)
        except ValidationError as exc:
            raise RepoServerError(
                f"repo-server returned a malformed response for {endpoint}: {exc}",
                status_code=resp.status_code,
            ) from exc


def _error_detail(resp: httpx.Response) -> str:
    """Best-effort message from an error body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text.strip() or resp.reason_phrase
    if isinstance(data, dict):
        for key in ("error", "message"):
            if isinstance(data.get(key), str):
                return data[key]
    logger.debug("Unrecognised repo-server error body: %r", data)
    return resp.reason_phrase
