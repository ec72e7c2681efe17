"""Repositories: predicate-driven read access per model."""

from adminkit.infrastructure.persistence.repositories.base import QueryRepository

__all__ = ["QueryRepository"]
