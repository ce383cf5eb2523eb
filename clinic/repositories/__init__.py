from .in_memory_repository import EHRRecordSetRepository, InMemoryRepository

__all__ = ["InMemoryRepository", "EHRRecordSetRepository"]
