"""
Router factory for the standard entity endpoints.

Every entity exposes the same five routes over its ``CrudService``:

* ``GET /`` – list all records;
* ``GET /{record_id}`` – one record, 404 if absent;
* ``POST /`` – create, returns 201 and the stored record;
* ``PUT /{record_id}`` – partial update (only fields sent are applied);
* ``DELETE /{record_id}`` – delete, 204 or 404.

Services report absence with ``None``/``False``; the handlers turn
that into HTTP 404.  A ``ValueError`` raised while building a record
(for example a merged update that fails validation) becomes a 400.
"""

from typing import Any, Callable, List, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from loyalty_admin_api.app.core.store import EntityStore, get_store
from loyalty_admin_api.app.services.crud_service import CrudService

ServiceSelector = Callable[[EntityStore], CrudService[Any]]


def build_crud_router(
    entity: str,
    select: ServiceSelector,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
) -> APIRouter:
    """Return an ``APIRouter`` with list/get/create/update/delete routes.

    Parameters
    ----------
    entity : str
        Display name used in summaries and error messages
        (e.g. ``"Business"``).
    select : callable
        Picks the entity's service from the store,
        e.g. ``lambda store: store.businesses``.
    create_schema, update_schema, read_schema : type
        Request and response models for the entity.
    """
    router = APIRouter()
    not_found = f"{entity} not found"

    def get_service(store: EntityStore = Depends(get_store)) -> CrudService[Any]:
        return select(store)

    @router.get("/", response_model=List[read_schema], summary=f"List {entity} records")
    async def list_records(service: CrudService[Any] = Depends(get_service)) -> List[Any]:
        return await service.list()

    @router.get("/{record_id}", response_model=read_schema, summary=f"Get a {entity} record")
    async def get_record(record_id: int, service: CrudService[Any] = Depends(get_service)) -> Any:
        record = await service.get_by_id(record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.post(
        "/",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {entity} record",
    )
    async def create_record(
        payload: create_schema,
        service: CrudService[Any] = Depends(get_service),
    ) -> Any:
        try:
            return await service.create(payload)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    @router.put("/{record_id}", response_model=read_schema, summary=f"Update a {entity} record")
    async def update_record(
        record_id: int,
        payload: update_schema,
        service: CrudService[Any] = Depends(get_service),
    ) -> Any:
        try:
            record = await service.update(record_id, payload)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete a {entity} record",
    )
    async def delete_record(record_id: int, service: CrudService[Any] = Depends(get_service)) -> None:
        deleted = await service.delete(record_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return None

    return router
