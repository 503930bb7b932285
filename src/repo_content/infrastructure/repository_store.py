"""Configured repository store: implements the RepositoryResolver port."""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import SecretStr

from repo_content.domain.entities import RepositoryCredentials, RepositoryDescriptor
from repo_content.domain.exceptions import RepositoryNotFoundError
from repo_content.domain.value_objects import (
    normalize_repo_url,
    normalize_url_prefix,
    url_has_prefix,
)
from repo_content.infrastructure.config import (
    CredentialTemplateConfig,
    RepositoryConfig,
    Settings,
)

logger = logging.getLogger(__name__)


def _secret(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value is not None else None


class ConfiguredRepositoryStore:
    """Resolves repository URLs against registrations and credential templates.

    An exact (normalised) registration wins.  Otherwise the template with the
    longest matching URL prefix supplies the credentials.  The store is never
    mutated after construction.
    """

    def __init__(
        self,
        repositories: Iterable[RepositoryDescriptor] = (),
        credentials: Iterable[RepositoryCredentials] = (),
    ) -> None:
        self._repositories: dict[str, RepositoryDescriptor] = {
            normalize_repo_url(r.repo): r for r in repositories
        }
        self._credentials: tuple[RepositoryCredentials, ...] = tuple(
            sorted(
                credentials,
                key=lambda c: len(normalize_url_prefix(c.url_prefix)),
                reverse=True,
            )
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> ConfiguredRepositoryStore:
        return cls(
            repositories=[_to_descriptor(r) for r in settings.repositories],
            credentials=[_to_credentials(c) for c in settings.repository_credentials],
        )

    async def get_repository(self, repo_url: str) -> RepositoryDescriptor:
        """Return the descriptor for *repo_url* or raise RepositoryNotFoundError."""
        key = normalize_repo_url(repo_url)
        if not key:
            raise RepositoryNotFoundError("repository URL must not be empty")

        registered = self._repositories.get(key)
        if registered is not None:
            logger.debug(
                "Resolved registered repository %s (credentials: %s)",
                repo_url,
                registered.has_credentials,
            )
            return registered

        for creds in self._credentials:
            if url_has_prefix(repo_url, creds.url_prefix):
                repo = RepositoryDescriptor.from_credentials(repo_url.strip(), creds)
                logger.debug(
                    "Using credential template %s for %s (credentials: %s)",
                    creds.url_prefix,
                    repo_url,
                    repo.has_credentials,
                )
                return repo

        raise RepositoryNotFoundError(f"repository not found: {repo_url}")


def _to_descriptor(cfg: RepositoryConfig) -> RepositoryDescriptor:
    return RepositoryDescriptor(
        repo=cfg.url,
        type=cfg.type,
        name=cfg.name,
        project=cfg.project,
        username=cfg.username,
        password=_secret(cfg.password),
        ssh_private_key=_secret(cfg.ssh_private_key),
        tls_client_cert_data=cfg.tls_client_cert_data,
        tls_client_cert_key=_secret(cfg.tls_client_cert_key),
        insecure=cfg.insecure,
        enable_lfs=cfg.enable_lfs,
        proxy=cfg.proxy,
    )


def _to_credentials(cfg: CredentialTemplateConfig) -> RepositoryCredentials:
    return RepositoryCredentials(
        url_prefix=cfg.url,
        type=cfg.type,
        username=cfg.username,
        password=_secret(cfg.password),
        ssh_private_key=_secret(cfg.ssh_private_key),
        tls_client_cert_data=cfg.tls_client_cert_data,
        tls_client_cert_key=_secret(cfg.tls_client_cert_key),
        enable_lfs=cfg.enable_lfs,
        proxy=cfg.proxy,
    )
