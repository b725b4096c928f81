"""Application factories for repository access."""

from cashbook.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
