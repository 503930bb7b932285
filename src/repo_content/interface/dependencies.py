"""Dependency wiring: builds the facade from settings."""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx

from repo_content.infrastructure.config import Settings, get_settings
from repo_content.infrastructure.repo_server_client import RepoServerClientset
from repo_content.infrastructure.repository_store import ConfiguredRepositoryStore
from repo_content.services.repo_content_service import RepoContentService


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


def build_service(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RepoContentService:
    """Bind the configured repository store and repo-server client into a facade."""
    token = (
        settings.repo_server_token.get_secret_value()
        if settings.repo_server_token
        else None
    )
    connector = RepoServerClientset(
        settings.repo_server_url,
        timeout=settings.repo_server_timeout,
        token=token,
        transport=transport,
    )
    return RepoContentService(
        resolver=ConfiguredRepositoryStore.from_settings(settings),
        connector=connector,
    )


@lru_cache(maxsize=1)
def get_service() -> RepoContentService:
    """Return the process-wide facade built from the environment."""
    settings = get_settings()
    configure_logging(settings)
    return build_service(settings)
