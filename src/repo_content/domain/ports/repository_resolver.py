"""Repository resolver port, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from repo_content.domain.entities import RepositoryDescriptor


@runtime_checkable
class RepositoryResolver(Protocol):
    """The single capability the facade needs from a credential store.

    Keeping this to one method means a test double only has to implement
    ``get_repository``, not a whole store.
    """

    async def get_repository(self, repo_url: str) -> RepositoryDescriptor:
        """Return the credentialed descriptor for *repo_url* or raise."""
        ...
