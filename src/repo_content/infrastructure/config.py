"""Application configuration: loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_content.domain.entities import RepositoryType


class CredentialTemplateConfig(BaseModel):
    """Credentials shared by every repository under ``url``."""

    url: str
    type: RepositoryType = RepositoryType.GIT
    username: str | None = None
    password: SecretStr | None = None
    ssh_private_key: SecretStr | None = None
    tls_client_cert_data: str | None = None
    tls_client_cert_key: SecretStr | None = None
    enable_lfs: bool = False
    proxy: str | None = None


class RepositoryConfig(CredentialTemplateConfig):
    """A single registered repository."""

    name: str | None = None
    project: str | None = None
    insecure: bool = False


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    ``REPOSITORIES`` and ``REPOSITORY_CREDENTIALS`` are JSON lists.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    repo_server_url: str = "http://localhost:8081"
    repo_server_timeout: float = 60.0
    repo_server_token: SecretStr | None = None
    repositories: list[RepositoryConfig] = []
    repository_credentials: list[CredentialTemplateConfig] = []
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
