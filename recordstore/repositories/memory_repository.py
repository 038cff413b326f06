"""Record repositories - in-memory implementations."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from recordstore.models.domain import IdStrategy, Record
from recordstore.models.errors import InvalidDataError, NotFoundError
from recordstore.repositories.base import Persistence
from recordstore.services.config_service import StoreSettings, get_config_service
from recordstore.services.validation_service import ValidatorFn, get_default_validator

logger = logging.getLogger(__name__)


class MemoryRepository(Persistence[Record]):
    """
    Persistence adapter holding records in a list.

    Current implementation: In-memory (list), IDs are list positions
    Rationale: Stand-in for a real backend in tests, cheap and deterministic
    Caveat: delete() shifts later records down, so IDs captured before a
    deletion at or below their position point at a different record after it.
    Use KeyedMemoryRepository when IDs must survive deletions.

    Operations never await between lookup and mutation, so each one is
    atomic under a single event loop.
    """

    def __init__(
        self,
        model: Any = None,
        validator: Optional[ValidatorFn] = None,
        settings: Optional[StoreSettings] = None,
    ):
        super().__init__(model)
        self.validator = validator or get_default_validator()
        self.settings = settings or StoreSettings()
        self.data: List[Record] = []

    async def list(self, id: Optional[int] = None) -> Union[List[Record], Record]:
        """List all records, or get the record stored at ``id``."""
        if self._lists_all(id):
            return self._all()
        return self._lookup(id)

    async def create(self, data: Record) -> int:
        """Validate and append a record. Returns its ID."""
        self._check(data)
        id = self._append(data)
        logger.debug("Created record %s", id)
        return id

    async def update(self, id: int, data: Mapping[str, Any]) -> Record:
        """Merge ``data`` over the stored record. Returns the previous value."""
        existing = self._lookup(id)
        candidate = {**existing, **data}
        self._check(candidate)
        self._store(id, candidate)
        logger.debug("Updated record %s", id)
        return existing

    async def replace(self, id: int, data: Record) -> Record:
        """Store ``data`` verbatim in place of the record. Returns the previous value."""
        existing = self._lookup(id)
        self._check(data)
        self._store(id, data)
        logger.debug("Replaced record %s", id)
        return existing

    async def delete(self, id: int) -> Record:
        """Remove the record. Returns the removed value."""
        existing = self._lookup(id)
        self._remove(id)
        logger.debug("Deleted record %s", id)
        return existing

    def validate(self, data: Mapping[str, Any]) -> Optional[InvalidDataError]:
        """Run the configured validator. Returns an InvalidDataError or None."""
        return self.validator(data)

    def _check(self, data: Mapping[str, Any]) -> None:
        err = self.validate(data)
        if err is not None:
            logger.debug("Rejected record: %s", err.data)
            raise err

    def _lists_all(self, id: Optional[int]) -> bool:
        if self.settings.falsy_id_lists_all:
            return not id
        return id is None

    def _not_found(self, id: Any) -> NotFoundError:
        logger.debug("Record %r not found", id)
        return NotFoundError()

    # Storage primitives, overridden by KeyedMemoryRepository.

    def _all(self) -> List[Record]:
        return list(self.data)

    def _lookup(self, id: Any) -> Record:
        # bool is an int subclass but never a valid position
        if isinstance(id, bool) or not isinstance(id, int):
            raise self._not_found(id)
        if id < 0 or id >= len(self.data) or self.data[id] is None:
            raise self._not_found(id)
        return self.data[id]

    def _append(self, data: Record) -> int:
        self.data.append(data)
        return len(self.data) - 1

    def _store(self, id: int, data: Record) -> None:
        self.data[id] = data

    def _remove(self, id: int) -> None:
        del self.data[id]


class KeyedMemoryRepository(MemoryRepository):
    """
    Persistence adapter with stable IDs.

    IDs come from a monotonic counter and are never reused, so deleting a
    record leaves every other ID valid. Only ``None`` means "no id".
    """

    def __init__(
        self,
        model: Any = None,
        validator: Optional[ValidatorFn] = None,
        settings: Optional[StoreSettings] = None,
    ):
        super().__init__(model, validator, settings)
        self.data: Dict[int, Record] = {}
        self._next_id = 0

    def _lists_all(self, id: Optional[int]) -> bool:
        return id is None

    def _all(self) -> List[Record]:
        return list(self.data.values())

    def _lookup(self, id: Any) -> Record:
        if isinstance(id, bool) or not isinstance(id, int) or id not in self.data:
            raise self._not_found(id)
        return self.data[id]

    def _append(self, data: Record) -> int:
        id = self._next_id
        self._next_id += 1
        self.data[id] = data
        return id


def create_repository(
    model: Any = None,
    validator: Optional[ValidatorFn] = None,
    settings: Optional[StoreSettings] = None,
) -> MemoryRepository:
    """Build the repository matching the configured id strategy."""
    if settings is None:
        settings = get_config_service().settings

    if settings.id_strategy == IdStrategy.SEQUENTIAL:
        return KeyedMemoryRepository(model, validator, settings)
    return MemoryRepository(model, validator, settings)
