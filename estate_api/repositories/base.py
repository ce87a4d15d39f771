"""
Base repository class with common CRUD operations over an in-memory table.
Provides generic data operations that can be extended by specific repositories.
"""

from dataclasses import fields
from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type, Callable
import copy
import logging
import threading

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class InMemoryRepository(Generic[RecordType]):
    """
    Base repository for an id-keyed table. Records can be created, read and
    updated here; `DeletableRepository` adds removal.

    Ids come from a per-table counter starting at 1. The counter only moves
    forward, so an id is never handed out twice, even after a delete.
    Every row leaves the repository as a deep copy.

    Methods are coroutines so a database-backed repository can keep the same
    signatures. None of them awaits while holding the table lock, which makes
    each operation atomic with respect to the others.
    """

    def __init__(self, model: Type[RecordType], clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize repository with its record class.

        Args:
            model: Dataclass describing the rows of this table
            clock: Optional time source used for server-assigned timestamps
        """
        self.model = model
        self.clock = clock or utc_now
        self._rows: Dict[int, RecordType] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self._field_names = {f.name for f in fields(model)}

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def _server_values(self) -> Dict[str, Any]:
        """Server-assigned values stamped on insert, besides the id."""
        return {}

    def _insert(self, obj_in: Dict[str, Any]) -> RecordType:
        # Caller must hold self._lock
        record_id = self._next_id
        values = {
            key: copy.deepcopy(value)
            for key, value in obj_in.items()
            if key not in self.model.SERVER_FIELDS
        }
        values.update(self._server_values())
        record = self.model(id=record_id, **values)
        self._rows[record_id] = record
        self._next_id = record_id + 1
        logger.debug(f"Created {self.model_name} with id: {record_id}")
        return copy.deepcopy(record)

    def _merge(self, record: RecordType, changes: Dict[str, Any]) -> RecordType:
        """
        Apply present fields onto a copy of `record`, one field at a time.

        Fields missing from `changes` keep their stored value. Server-assigned
        fields are never overwritten.
        """
        merged = copy.deepcopy(record)
        for field_name, value in changes.items():
            if field_name in self.model.SERVER_FIELDS:
                continue
            if field_name not in self._field_names:
                raise ValueError(f"Field '{field_name}' does not exist on {self.model_name}")
            setattr(merged, field_name, copy.deepcopy(value))
        return merged

    async def create(self, obj_in: Dict[str, Any]) -> RecordType:
        """
        Create a new record.

        Args:
            obj_in: Dictionary of client-supplied field values

        Returns:
            Created record with server-assigned fields populated
        """
        with self._lock:
            try:
                return self._insert(obj_in)
            except TypeError as e:
                logger.error(f"Failed to create {self.model_name}: {e}")
                raise

    async def get_by_id(self, id: int) -> Optional[RecordType]:
        """
        Get a record by its ID.

        Args:
            id: Identifier of the record to retrieve

        Returns:
            Copy of the record if found, None otherwise
        """
        with self._lock:
            record = self._rows.get(id)
            if record is None:
                logger.debug(f"{self.model_name} with id {id} not found")
                return None
            return copy.deepcopy(record)

    async def get_all(self) -> List[RecordType]:
        """
        Get all records in insertion order.

        Returns:
            List of record copies
        """
        with self._lock:
            records = [copy.deepcopy(record) for record in self._rows.values()]
        logger.debug(f"Retrieved {len(records)} {self.model_name} records")
        return records

    async def filter_by(self, predicate: Callable[[RecordType], bool]) -> List[RecordType]:
        """
        Get records matching a predicate, in insertion order.

        Args:
            predicate: Function returning True for rows to keep

        Returns:
            List of matching record copies
        """
        with self._lock:
            records = [copy.deepcopy(record) for record in self._rows.values() if predicate(record)]
        logger.debug(f"Filtered {len(records)} {self.model_name} records")
        return records

    async def update(self, id: int, changes: Dict[str, Any]) -> Optional[RecordType]:
        """
        Merge present fields onto a record.

        Args:
            id: Identifier of the record to update
            changes: Field values to overwrite; an empty dict is a no-op

        Returns:
            Updated record if found, None otherwise
        """
        with self._lock:
            current = self._rows.get(id)
            if current is None:
                logger.debug(f"{self.model_name} with id {id} not found for update")
                return None

            if not changes:
                return copy.deepcopy(current)

            updated = self._merge(current, changes)
            self._rows[id] = updated
            logger.debug(f"Updated {self.model_name} with id: {id} ({', '.join(changes)})")
            return copy.deepcopy(updated)

    async def count(self) -> int:
        """Number of stored records."""
        with self._lock:
            return len(self._rows)

    async def exists(self, id: int) -> bool:
        """Check if a record exists by its ID."""
        with self._lock:
            return id in self._rows


class DeletableRepository(InMemoryRepository[RecordType]):
    """Repository for kinds whose records can be removed."""

    async def delete(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Identifier of the record to delete

        Returns:
            True if record was deleted, False if not found
        """
        with self._lock:
            deleted = self._rows.pop(id, None) is not None

        if deleted:
            logger.debug(f"Deleted {self.model_name} with id: {id}")
        else:
            logger.debug(f"{self.model_name} with id {id} not found for deletion")
        return deleted


class FeaturedRepository(DeletableRepository[RecordType]):
    """Repository for kinds carrying an `is_featured` flag."""

    def __init__(
        self,
        model: Type[RecordType],
        default_featured_limit: int,
        clock: Optional[Callable[[], datetime]] = None
    ):
        super().__init__(model, clock)
        self.default_featured_limit = default_featured_limit

    async def get_featured(self, limit: Optional[int] = None) -> List[RecordType]:
        """
        Get featured records, newest first.

        Records sharing a timestamp keep their insertion order.

        Args:
            limit: Maximum number of records; the repository default when None

        Returns:
            At most `limit` featured records
        """
        if limit is None:
            limit = self.default_featured_limit
        if limit < 0:
            raise ValueError("limit must not be negative")

        featured = await self.filter_by(lambda record: record.is_featured)
        # sorted() is stable, also with reverse=True
        featured = sorted(featured, key=lambda record: record.sort_timestamp, reverse=True)
        return featured[:limit]
