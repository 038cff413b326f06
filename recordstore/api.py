"""REST API endpoints exposing a persistence adapter."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from recordstore.models.dto import CreatedResponse, ErrorResponse
from recordstore.models.errors import PersistenceError
from recordstore.repositories.base import Persistence
from recordstore.repositories.memory_repository import create_repository

logger = logging.getLogger(__name__)

router = APIRouter()

_repository = None

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid data"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}


def get_repository() -> Persistence:
    """Get repository instance."""
    global _repository
    if _repository is None:
        _repository = create_repository()
    return _repository


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    """Answer with the status and payload carried by the error."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status, exc.message)
    body = ErrorResponse(detail=exc.message, data=exc.data)
    return JSONResponse(status_code=exc.status, content=body.model_dump())


@router.get("/")
async def list_records(repository: Persistence = Depends(get_repository)):
    """List all records."""
    return await repository.list()


@router.get("/{record_id}", responses=ERROR_RESPONSES)
async def get_record(record_id: int, repository: Persistence = Depends(get_repository)):
    """Get a single record."""
    return await repository.list(record_id)


@router.post("/", status_code=201, response_model=CreatedResponse, responses=ERROR_RESPONSES)
async def create_record(
    data: Dict[str, Any] = Body(...),
    repository: Persistence = Depends(get_repository),
):
    """Create a record."""
    record_id = await repository.create(data)
    return CreatedResponse(id=record_id)


@router.patch("/{record_id}", responses=ERROR_RESPONSES)
async def update_record(
    record_id: int,
    data: Dict[str, Any] = Body(...),
    repository: Persistence = Depends(get_repository),
):
    """Merge fields into a record. Returns the previous record."""
    return await repository.update(record_id, data)


@router.put("/{record_id}", responses=ERROR_RESPONSES)
async def replace_record(
    record_id: int,
    data: Dict[str, Any] = Body(...),
    repository: Persistence = Depends(get_repository),
):
    """Replace a record. Returns the previous record."""
    return await repository.replace(record_id, data)


@router.delete("/{record_id}", responses=ERROR_RESPONSES)
async def delete_record(record_id: int, repository: Persistence = Depends(get_repository)):
    """Delete a record. Returns the removed record."""
    return await repository.delete(record_id)
