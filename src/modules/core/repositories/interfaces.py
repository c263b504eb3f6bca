"""Generic repository interfaces (Dependency Inversion Principle).

Provides ``IRepository[T]`` for mutable aggregates and
``IInsertOnlyRepository[T]`` for records that are never changed once
written.  Domain-specific repository interfaces extend one of them.
Service-layer code depends on these abstractions, never on Django ORM
directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Protocol, TypeVar

from django.db import models

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Queryable(Protocol[T_co]):
    def filter(self, **kwargs: Any) -> models.QuerySet: ...


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``Order``).  Deletion is left to the
    interfaces that need it.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Queryable[T]:
        """List entities with optional filters (lazy, filterable further)."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""


class IInsertOnlyRepository(ABC, Generic[T]):
    """Contract for immutable records (invoices, payments).

    There is no ``save``: rows are inserted once and only read afterwards.
    Each interface declares the lookups its services actually use.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Insert a new record from ``data``."""
