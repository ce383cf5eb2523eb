import logging
import threading
from typing import Callable, Dict, Hashable, List, Optional, TypeVar

from clinic.core.exceptions import DuplicateKeyError, NotFoundError
from clinic.domain.entities import EHRRecordSet
from clinic.domain.interfaces import IEHRRecordSetRepository, IRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(IRepository[T]):
    """
    Insertion-ordered store of entities keyed by one attribute.

    All access goes through a re-entrant lock so a threaded adapter sees one
    mutation at a time. list_all() reads the live mapping on every call.
    """

    def __init__(self, entity_name: str, key_attr: str = "id"):
        self.entity_name = entity_name
        self.key_attr = key_attr
        self._items: Dict[Hashable, T] = {}
        self._lock = threading.RLock()

    def _key_of(self, entity: T) -> Hashable:
        return getattr(entity, self.key_attr)

    def add(self, entity: T) -> T:
        key = self._key_of(entity)
        with self._lock:
            if key in self._items:
                logger.critical(
                    f"Duplicate {self.entity_name} key {key}",
                    extra={"context": {"entity": self.entity_name, "key": key}},
                )
                raise DuplicateKeyError(self.entity_name, key)
            self._items[key] = entity
        return entity

    def get(self, key: Hashable) -> T:
        entity = self.get_by_id(key)
        if entity is None:
            raise NotFoundError(self.entity_name, key)
        return entity

    def get_by_id(self, key: Hashable) -> Optional[T]:
        with self._lock:
            return self._items.get(key)

    def list_all(self) -> List[T]:
        with self._lock:
            return list(self._items.values())

    def update(self, key: Hashable, mutator: Callable[[T], None]) -> T:
        with self._lock:
            entity = self._items.get(key)
            if entity is None:
                raise NotFoundError(self.entity_name, key)
            mutator(entity)
            return entity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._items


class EHRRecordSetRepository(InMemoryRepository[EHRRecordSet], IEHRRecordSetRepository):
    """Health record sets, one per patient, keyed by patient id."""

    def __init__(self):
        super().__init__("EHR record set", key_attr="patient_id")

    def get_or_create(self, patient_id: int) -> EHRRecordSet:
        with self._lock:
            record_set = self._items.get(patient_id)
            if record_set is None:
                record_set = self.add(EHRRecordSet(patient_id=patient_id))
                logger.info(
                    "EHR record set created",
                    extra={"context": {"patient_id": patient_id}},
                )
            return record_set
