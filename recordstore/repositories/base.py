"""Base persistence adapter interface."""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union

from recordstore.models.errors import InvalidDataError

T = TypeVar('T')


class Persistence(ABC, Generic[T]):
    """
    Base persistence adapter interface.

    Mirrors the shape of adapters wrapping a real backend (an ORM model,
    a document store, ...) so that calling code can run against any of
    them unmodified. Every data operation is a coroutine; failures are
    raised as PersistenceError subclasses.
    """

    def __init__(self, model: Any = None):
        # Opaque backend handle, kept for signature compatibility only.
        self.model = model if model is not None else {}

    @abstractmethod
    async def list(self, id: Optional[int] = None) -> Union[List[T], T]:
        """List all entities, or get one entity by ID."""
        pass

    @abstractmethod
    async def create(self, data: T) -> int:
        """Create an entity. Returns its ID."""
        pass

    @abstractmethod
    async def update(self, id: int, data: Mapping[str, Any]) -> T:
        """Merge fields into an entity. Returns the previous value."""
        pass

    @abstractmethod
    async def replace(self, id: int, data: T) -> T:
        """Replace an entity entirely. Returns the previous value."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> T:
        """Delete an entity by ID. Returns the removed value."""
        pass

    @abstractmethod
    def validate(self, data: Mapping[str, Any]) -> Optional[InvalidDataError]:
        """Check a candidate entity. Returns an error instead of raising it."""
        pass
