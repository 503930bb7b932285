"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

FileSet = dict[str, bytes]
"""Relative file path → raw file content."""

DirectoryList = list[str]


class RepositoryType(str, Enum):
    """Kind of repository the content backend has to read."""

    GIT = "git"
    HELM = "helm"


@dataclass(frozen=True, slots=True)
class RepositoryCredentials:
    """Credential template applied to every repository under ``url_prefix``."""

    url_prefix: str
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    ssh_private_key: str | None = field(default=None, repr=False)
    tls_client_cert_data: str | None = field(default=None, repr=False)
    tls_client_cert_key: str | None = field(default=None, repr=False)
    type: RepositoryType = RepositoryType.GIT
    enable_lfs: bool = False
    proxy: str | None = None


@dataclass(frozen=True, slots=True)
class RepositoryDescriptor:
    """A repository URL resolved together with the auth material needed to read it."""

    repo: str
    type: RepositoryType = RepositoryType.GIT
    name: str | None = None
    project: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    ssh_private_key: str | None = field(default=None, repr=False)
    tls_client_cert_data: str | None = field(default=None, repr=False)
    tls_client_cert_key: str | None = field(default=None, repr=False)
    insecure: bool = False
    enable_lfs: bool = False
    proxy: str | None = None

    @property
    def has_credentials(self) -> bool:
        return any(
            (
                self.username,
                self.password,
                self.ssh_private_key,
                self.tls_client_cert_data,
            )
        )

    @classmethod
    def from_credentials(
        cls, repo: str, creds: RepositoryCredentials
    ) -> RepositoryDescriptor:
        """Build a descriptor for *repo* using a matching credential template."""
        return cls(
            repo=repo,
            type=creds.type,
            username=creds.username,
            password=creds.password,
            ssh_private_key=creds.ssh_private_key,
            tls_client_cert_data=creds.tls_client_cert_data,
            tls_client_cert_key=creds.tls_client_cert_key,
            enable_lfs=creds.enable_lfs,
            proxy=creds.proxy,
        )
