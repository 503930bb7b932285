"""Pydantic request / response DTOs for the repo-server wire format."""

from __future__ import annotations

from pydantic import Base64Bytes, BaseModel

from repo_content.domain.entities import RepositoryDescriptor, RepositoryType


class RepositoryPayload(BaseModel):
    """Descriptor as sent to the repo-server (credentials included)."""

    repo: str
    type: RepositoryType = RepositoryType.GIT
    name: str | None = None
    project: str | None = None
    username: str | None = None
    password: str | None = None
    ssh_private_key: str | None = None
    tls_client_cert_data: str | None = None
    tls_client_cert_key: str | None = None
    insecure: bool = False
    enable_lfs: bool = False
    proxy: str | None = None

    @classmethod
    def from_descriptor(cls, repo: RepositoryDescriptor) -> RepositoryPayload:
        return cls(
            repo=repo.repo,
            type=repo.type,
            name=repo.name,
            project=repo.project,
            username=repo.username,
            password=repo.password,
            ssh_private_key=repo.ssh_private_key,
            tls_client_cert_data=repo.tls_client_cert_data,
            tls_client_cert_key=repo.tls_client_cert_key,
            insecure=repo.insecure,
            enable_lfs=repo.enable_lfs,
            proxy=repo.proxy,
        )


class GetFilesRequest(BaseModel):
    """Body for ``POST /api/v1/repository/files``."""

    repo: RepositoryPayload
    revision: str
    pattern: str


class GetFilesResponse(BaseModel):
    """File path → base64-encoded content."""

    items: dict[str, Base64Bytes] = {}


class GetDirectoriesRequest(BaseModel):
    """Body for ``POST /api/v1/repository/directories``."""

    repo: RepositoryPayload
    revision: str


class GetDirectoriesResponse(BaseModel):
    items: list[str] = []
