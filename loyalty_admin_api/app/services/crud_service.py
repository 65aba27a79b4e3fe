"""
Generic CRUD service over an in‑memory sequence of records.

Every entity of the dashboard (businesses, customers, transactions,
...) is served by a ``CrudService`` parameterized with its Pydantic
record type and the name of its primary‑key field.  The service owns
an ordered list of records and offers the usual operations:

* ``list`` returns a shallow copy of the sequence;
* ``get_by_id`` finds the first record whose key equals the id
  (same type and value);
* ``create`` assigns ``max(existing ids) + 1`` (``1`` when empty);
* ``update`` replaces a record with a shallow merge of the old record
  and the supplied fields;
* ``delete`` removes the first matching record.

Missing records are reported as ``None`` (or ``False`` for
``delete``); nothing here raises for an unknown id.  Every operation
first sleeps for a configurable delay (see ``Latency``) to emulate a
remote backend.  All mutations happen after the sleep with no further
``await``, so concurrent requests on the event loop never interleave
a read‑modify‑write.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Fields = Union[Mapping[str, Any], BaseModel]


@dataclass(frozen=True)
class Latency:
    """Artificial per‑operation delays, in milliseconds."""

    list_ms: int = 300
    get_ms: int = 200
    create_ms: int = 400
    update_ms: int = 400
    delete_ms: int = 300
    relation_ms: int = 300

    @classmethod
    def disabled(cls) -> "Latency":
        return cls(0, 0, 0, 0, 0, 0)

    async def wait(self, operation: str) -> None:
        delay_ms = getattr(self, f"{operation}_ms")
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)


class CrudService(Generic[T]):
    """List/get/create/update/delete over one entity's records.

    Parameters
    ----------
    name : str
        Human readable entity name used in log messages
        (e.g. ``"business"``).
    record_type : type
        Pydantic model describing a stored record.  Records are
        validated against it on create and on every update.
    key_field : str
        Name of the primary‑key field on ``record_type``.
    records : iterable
        Initial contents, either model instances or plain mappings.
    latency : Latency, optional
        Delays applied before each operation.  Defaults to
        ``Latency()``; pass ``Latency.disabled()`` in tests.
    """

    def __init__(
        self,
        name: str,
        record_type: Type[T],
        key_field: str,
        records: Iterable[Union[T, Mapping[str, Any]]] = (),
        latency: Optional[Latency] = None,
    ) -> None:
        if key_field not in record_type.model_fields:
            raise ValueError(f"{record_type.__name__} has no field {key_field!r}")
        self.name = name
        self.record_type = record_type
        self.key_field = key_field
        self.key: Callable[[T], Any] = attrgetter(key_field)
        self.latency = latency or Latency()
        self._records: List[T] = [self._coerce(record) for record in records]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"CrudService({self.name!r}, {len(self._records)} records)"

    async def list(self) -> List[T]:
        """Return a shallow copy of all records in insertion order."""
        await self.latency.wait("list")
        return list(self._records)

    async def get_by_id(self, record_id: Any) -> Optional[T]:
        await self.latency.wait("get")
        index = self._index_of(record_id)
        if index is None:
            logger.debug("%s %s not found", self.name, record_id)
            return None
        return self._records[index]

    async def create(self, fields: Fields) -> T:
        """Append a new record built from ``fields`` and return it.

        The primary key is always assigned here; a key present in
        ``fields`` is overwritten.  Raises ``pydantic.ValidationError``
        if the resulting record does not validate.
        """
        await self.latency.wait("create")
        data = self._as_dict(fields)
        new_id = self._next_id()
        data[self.key_field] = new_id
        record = self.record_type.model_validate(data)
        self._records.append(record)
        logger.info("Created %s %s", self.name, new_id)
        return record

    async def update(self, record_id: Any, partial: Fields) -> Optional[T]:
        """Shallow‑merge ``partial`` into the record with ``record_id``.

        For a Pydantic ``partial`` only the fields that were explicitly
        set are applied.  Returns the merged record or ``None`` if no
        record has that id.
        """
        await self.latency.wait("update")
        index = self._index_of(record_id)
        if index is None:
            logger.debug("Cannot update %s %s: not found", self.name, record_id)
            return None
        changes = self._as_dict(partial, exclude_unset=True)
        merged = self.record_type.model_validate({**self._records[index].model_dump(), **changes})
        self._records[index] = merged
        logger.info("Updated %s %s (%s)", self.name, record_id, ", ".join(sorted(changes)) or "no changes")
        return merged

    async def delete(self, record_id: Any) -> bool:
        """Remove the record with ``record_id``; return whether one was removed."""
        await self.latency.wait("delete")
        index = self._index_of(record_id)
        if index is None:
            logger.debug("Cannot delete %s %s: not found", self.name, record_id)
            return False
        del self._records[index]
        logger.info("Deleted %s %s", self.name, record_id)
        return True

    async def where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return every record matching ``predicate``, in insertion order."""
        await self.latency.wait("relation")
        return [record for record in self._records if predicate(record)]

    async def first_where(self, predicate: Callable[[T], bool]) -> Optional[T]:
        await self.latency.wait("relation")
        return next((record for record in self._records if predicate(record)), None)

    def _index_of(self, record_id: Any) -> Optional[int]:
        # Keys match only when both value and type agree, so True or 1.0
        # never find the record keyed 1.
        for index, record in enumerate(self._records):
            key = self.key(record)
            if type(key) is type(record_id) and key == record_id:
                return index
        return None

    def _next_id(self) -> int:
        return max((int(self.key(record)) for record in self._records), default=0) + 1

    def _coerce(self, record: Union[T, Mapping[str, Any]]) -> T:
        if isinstance(record, self.record_type):
            return record
        return self.record_type.model_validate(self._as_dict(record))

    @staticmethod
    def _as_dict(fields: Fields, exclude_unset: bool = False) -> Dict[str, Any]:
        if isinstance(fields, BaseModel):
            return fields.model_dump(exclude_unset=exclude_unset)
        return dict(fields)
