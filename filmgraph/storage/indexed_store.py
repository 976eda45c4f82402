# filmgraph/storage/indexed_store.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import (
    Callable, Dict, Generic, Hashable, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar,
)

from filmgraph.common.concurrency.id_allocator import IdentityAllocator
from filmgraph.common.logging import get_logger
from filmgraph.domain.errors import DuplicateConflictError, InvalidArgumentError, NotFoundError

logger = get_logger(__name__)


class StoredEntity(Protocol):
    id: Optional[int]

    def clone(self, **changes) -> "StoredEntity": ...


E = TypeVar("E", bound=StoredEntity)


@dataclass(frozen=True)
class SecondaryIndex(Generic[E]):
    """
    A uniqueness index. `key_of` must return an already normalized,
    hashable key, or None when the entity lacks the key fields.
    """
    name: str
    key_of: Callable[[E], Optional[Hashable]]


class IndexedStore(Generic[E]):
    """
    In-memory record set keyed by id plus one or more unique secondary indices.

    Concurrency
    -----------
    One mutex per store guards the primary map and every index map together,
    so a reader never sees a record without its index entries (or a stale
    entry pointing at it). Critical sections are O(1) dict work, except
    all() which copies the record list.

    Copies
    ------
    Records are cloned on the way in and on the way out; callers never hold
    a reference into the store.

    Preserved fields
    ----------------
    Fields named in `preserved_fields` (relationship sets) are merged on
    update: None in the payload keeps the stored value, anything else
    replaces it. On create, None becomes an empty set.
    """

    kind: str = "entity"

    def __init__(
        self,
        *,
        indexes: Iterable[SecondaryIndex[E]] = (),
        preserved_fields: Iterable[str] = (),
        allocator: Optional[IdentityAllocator] = None,
        id_start: int = 1,
    ) -> None:
        self._index_defs: Dict[str, SecondaryIndex[E]] = {ix.name: ix for ix in indexes}
        self._indexes: Dict[str, Dict[Hashable, int]] = {name: {} for name in self._index_defs}
        self._records: Dict[int, E] = {}
        self._preserved: Tuple[str, ...] = tuple(preserved_fields)
        self._ids = allocator or IdentityAllocator(start=id_start, name=self.kind)
        self._lock = threading.RLock()

    # ---------------- writes ----------------

    def create(self, candidate: E) -> E:
        """Store a copy of `candidate` under a fresh id. Any id on the candidate is ignored."""
        if candidate is None:
            raise InvalidArgumentError(f"{self.kind} must not be None")

        with self._lock:
            keys = self._keys_for(candidate)
            self._ensure_free(keys, owner=None, candidate=candidate)

            new_id = self._ids.next_id()
            record = candidate.clone(id=new_id)
            for f in self._preserved:
                if getattr(record, f) is None:
                    setattr(record, f, set())

            for name, key in keys.items():
                self._indexes[name][key] = new_id
            self._records[new_id] = record

        logger.info("Created %s id=%s", self.kind, new_id)
        return record.clone()

    def update(self, entity: E) -> E:
        """
        Replace the stored record with the same id.
        Raises NotFoundError if there is none.
        """
        if entity is None:
            raise InvalidArgumentError(f"{self.kind} must not be None")

        with self._lock:
            current = self._records.get(entity.id) if self._valid_id(entity.id) else None
            if current is None:
                logger.warning("Update of unknown %s id=%s", self.kind, entity.id)
                raise NotFoundError(self.not_found_message(entity.id))

            record = entity.clone()
            for f in self._preserved:
                if getattr(record, f) is None:
                    setattr(record, f, set(getattr(current, f) or ()))

            self._commit(current, record)

        logger.info("Updated %s id=%s", self.kind, record.id)
        return record.clone()

    def modify(self, ids: Sequence[int], mutate: Callable[[Dict[int, E]], Iterable[int]]) -> Dict[int, E]:
        """
        Atomic read-modify-write over several records.

        `mutate` receives private copies keyed by id and returns the ids it
        actually changed; only those are written back. Either every changed
        record commits or none does. Secondary-key fields may not change here.
        """
        with self._lock:
            working: Dict[int, E] = {}
            for i in ids:
                rec = self._records.get(i) if self._valid_id(i) else None
                if rec is None:
                    raise NotFoundError(self.not_found_message(i))
                working[i] = rec.clone()

            changed = set(mutate(working) or ())
            unknown = changed - working.keys()
            if unknown:
                raise InvalidArgumentError(f"mutation reported ids outside the working set: {sorted(unknown)}")

            for i in changed:
                if self._keys_for(working[i]) != self._keys_for(self._records[i]):
                    raise InvalidArgumentError(f"modify() cannot change indexed fields of {self.kind} id={i}")

            for i in changed:
                self._records[i] = working[i]

        if changed:
            logger.debug("Modified %s ids=%s", self.kind, sorted(changed))
        return {i: rec.clone() for i, rec in working.items()}

    # ---------------- reads ----------------

    def get_by_id(self, entity_id: Optional[int]) -> Optional[E]:
        if not self._valid_id(entity_id):
            return None
        with self._lock:
            rec = self._records.get(entity_id)  # type: ignore[arg-type]
        logger.debug("Lookup %s id=%s found=%s", self.kind, entity_id, rec is not None)
        return rec.clone() if rec is not None else None

    def exists_by_id(self, entity_id: Optional[int]) -> bool:
        if not self._valid_id(entity_id):
            return False
        with self._lock:
            return entity_id in self._records

    def get_by_key(self, index: str, key: Optional[Hashable]) -> Optional[E]:
        """Exact match on a normalized key. Missing/None keys return None."""
        if key is None:
            return None
        with self._lock:
            entity_id = self._index(index).get(key)
            rec = self._records.get(entity_id) if entity_id is not None else None
        return rec.clone() if rec is not None else None

    def exists_by_key(self, index: str, key: Optional[Hashable]) -> bool:
        if key is None:
            return False
        with self._lock:
            return key in self._index(index)

    def all(self) -> List[E]:
        with self._lock:
            records = [self._records[i] for i in sorted(self._records)]
        return [r.clone() for r in records]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()

    @property
    def allocator(self) -> IdentityAllocator:
        return self._ids

    def not_found_message(self, entity_id) -> str:
        return f"{self.kind} with id {entity_id} not found"

    # ---------------- internals ----------------

    @staticmethod
    def _valid_id(entity_id) -> bool:
        return isinstance(entity_id, int) and not isinstance(entity_id, bool)

    def _index(self, name: str) -> Dict[Hashable, int]:
        try:
            return self._indexes[name]
        except KeyError:
            raise InvalidArgumentError(f"{self.kind} store has no index {name!r}") from None

    def _keys_for(self, entity: E) -> Dict[str, Hashable]:
        keys: Dict[str, Hashable] = {}
        for name, ix in self._index_defs.items():
            key = ix.key_of(entity)
            if key is None:
                raise InvalidArgumentError(f"{self.kind} is missing the fields for index {name!r}")
            keys[name] = key
        return keys

    def _ensure_free(self, keys: Mapping[str, Hashable], owner: Optional[int], candidate: E) -> None:
        for name, key in keys.items():
            holder = self._indexes[name].get(key)
            if holder is not None and holder != owner:
                raise DuplicateConflictError(self.duplicate_message(name, candidate))

    def duplicate_message(self, index: str, candidate: E) -> str:
        """Embeds the value as the caller sent it, not its normalized key."""
        return f"{self.kind} with {index} {getattr(candidate, index, None)} already exists"

    def _commit(self, current: E, record: E) -> None:
        """Swap a record and its changed index entries. Caller holds the lock."""
        old_keys = self._keys_for(current)
        new_keys = self._keys_for(record)
        changed = {n: k for n, k in new_keys.items() if old_keys.get(n) != k}
        self._ensure_free(changed, owner=record.id, candidate=record)

        for name, key in changed.items():
            self._indexes[name].pop(old_keys[name], None)
            self._indexes[name][key] = record.id  # type: ignore[assignment]
            logger.debug("Reindexed %s id=%s %s: %r -> %r", self.kind, record.id, name, old_keys[name], key)
        self._records[record.id] = record  # type: ignore[index]
