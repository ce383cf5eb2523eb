"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, List, Optional, TypeVar

from .entities import EHRRecordSet

T = TypeVar("T")


class IRepositoryReader(ABC, Generic[T]):
    """Interface for read operations - Interface Segregation Principle."""

    @abstractmethod
    def get(self, key: Hashable) -> T:
        """Get an entity by key, raising NotFoundError when absent."""
        pass

    @abstractmethod
    def get_by_id(self, key: Hashable) -> Optional[T]:
        """Get an entity by key, or None."""
        pass

    @abstractmethod
    def list_all(self) -> List[T]:
        """Get all entities in insertion order."""
        pass


class IRepositoryWriter(ABC, Generic[T]):
    """Interface for write operations - Interface Segregation Principle."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Store a new entity, raising DuplicateKeyError if its key is taken."""
        pass

    @abstractmethod
    def update(self, key: Hashable, mutator: Callable[[T], None]) -> T:
        """Apply an in-place mutation to a stored entity."""
        pass


class IRepository(IRepositoryReader[T], IRepositoryWriter[T]):
    """Complete repository interface combining read/write operations."""

    pass


class IEHRRecordSetRepository(IRepository[EHRRecordSet]):
    """Record-set repository keyed by patient id."""

    @abstractmethod
    def get_or_create(self, patient_id: int) -> EHRRecordSet:
        """Return the patient's record set, creating an empty one if needed."""
        pass
