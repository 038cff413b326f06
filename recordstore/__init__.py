"""Record Store.

An in-process CRUD store with the shape of a real persistence adapter
(list/create/update/replace/delete/validate), for exercising code
written against a real backend in tests:

    store = MemoryRepository()
    record_id = await store.create({"valid": True, "name": "x"})
    await store.update(record_id, {"name": "y"})

Usage:
    ./start_server.py  # From repo root, serves the store over HTTP
"""

from .models.errors import InvalidDataError, NotFoundError, PersistenceError
from .repositories.base import Persistence
from .repositories.memory_repository import KeyedMemoryRepository, MemoryRepository, create_repository
from .services.validation_service import ValidFlagValidator, Validator

__all__ = [
    'InvalidDataError',
    'KeyedMemoryRepository',
    'MemoryRepository',
    'NotFoundError',
    'Persistence',
    'PersistenceError',
    'ValidFlagValidator',
    'Validator',
    'create_repository',
]
