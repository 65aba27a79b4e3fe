"""
Unit tests for the generic CrudService.
"""
from typing import Optional
from unittest.mock import AsyncMock, patch

import asyncio
import pytest
from pydantic import BaseModel, Field, ValidationError

from loyalty_admin_api.app.services.crud_service import CrudService, Latency


class Item(BaseModel):
    id: int
    label: Optional[str] = None
    size: int = Field(0, ge=0)


class ItemPatch(BaseModel):
    label: Optional[str] = None
    size: Optional[int] = None


def make_service(*ids: int) -> CrudService[Item]:
    return CrudService("item", Item, "id", [{"id": i} for i in ids], Latency.disabled())


async def ids_of(service: CrudService[Item]):
    return [item.id for item in await service.list()]


@pytest.mark.asyncio
async def test_create_on_empty_sequence_assigns_one():
    service = make_service()
    created = await service.create({"label": "first"})
    assert created.id == 1
    assert await ids_of(service) == [1]


@pytest.mark.asyncio
async def test_create_assigns_max_plus_one():
    service = make_service(1, 5, 3)
    created = await service.create({})
    assert created.id == 6
    assert await ids_of(service) == [1, 5, 3, 6]


@pytest.mark.asyncio
async def test_create_overrides_supplied_key():
    service = make_service(1, 2)
    created = await service.create({"id": 99, "label": "x"})
    assert created.id == 3
    assert await service.get_by_id(99) is None


@pytest.mark.asyncio
async def test_create_accepts_pydantic_model():
    service = make_service(1)
    created = await service.create(ItemPatch(label="from model", size=2))
    assert created == Item(id=2, label="from model", size=2)


@pytest.mark.asyncio
async def test_create_invalid_record_raises_and_does_not_append():
    service = make_service(1)
    with pytest.raises(ValidationError):
        await service.create({"size": -1})
    assert len(service) == 1


@pytest.mark.asyncio
async def test_get_by_id_returns_first_match_or_none():
    service = make_service(1, 2)
    assert (await service.get_by_id(2)).id == 2
    assert await service.get_by_id(42) is None
    assert await service.get_by_id("2") is None
    assert await service.get_by_id(True) is None
    assert await service.get_by_id(1.0) is None


@pytest.mark.asyncio
async def test_update_and_delete_require_matching_key_type():
    service = make_service(1)
    assert await service.update(1.0, {"label": "float"}) is None
    assert await service.delete(True) is False
    assert await service.get_by_id(1) == Item(id=1)


@pytest.mark.asyncio
async def test_update_overlays_partial_fields():
    service = CrudService("item", Item, "id", [{"id": 1, "label": "old", "size": 3}], Latency.disabled())
    updated = await service.update(1, {"label": "new"})
    assert updated == Item(id=1, label="new", size=3)
    assert await service.get_by_id(1) == updated


@pytest.mark.asyncio
async def test_update_with_model_applies_only_set_fields():
    service = CrudService("item", Item, "id", [{"id": 1, "label": "keep", "size": 3}], Latency.disabled())
    updated = await service.update(1, ItemPatch(size=7))
    assert updated.label == "keep"
    assert updated.size == 7


@pytest.mark.asyncio
async def test_update_missing_returns_none():
    service = make_service(1)
    assert await service.update(5, {"label": "nope"}) is None
    assert await ids_of(service) == [1]


@pytest.mark.asyncio
async def test_invalid_merge_raises_and_keeps_record():
    service = CrudService("item", Item, "id", [{"id": 1, "size": 3}], Latency.disabled())
    with pytest.raises(ValueError):
        await service.update(1, {"size": -5})
    assert (await service.get_by_id(1)).size == 3


@pytest.mark.asyncio
async def test_update_replaces_record_instead_of_mutating():
    service = make_service(1)
    before = await service.get_by_id(1)
    await service.update(1, {"label": "changed"})
    assert before.label is None


@pytest.mark.asyncio
async def test_delete_removes_exactly_one():
    service = make_service(1, 2, 3)
    assert await service.delete(2) is True
    assert len(service) == 2
    assert await service.delete(2) is False
    assert len(service) == 2


@pytest.mark.asyncio
async def test_create_then_delete_round_trip():
    service = make_service(1, 2, 3)
    original = await service.list()
    created = await service.create({"label": "temp"})
    assert await service.delete(created.id) is True
    assert await service.list() == original


@pytest.mark.asyncio
async def test_documented_example_sequence():
    service = make_service(1, 2, 3)
    created = await service.create({})
    assert created.id == 4
    assert await service.delete(2) is True
    assert await ids_of(service) == [1, 3, 4]
    assert await service.delete(2) is False


@pytest.mark.asyncio
async def test_list_returns_shallow_copy():
    service = make_service(1, 2)
    items = await service.list()
    items.clear()
    assert len(service) == 2


@pytest.mark.asyncio
async def test_where_and_first_where():
    service = CrudService(
        "item",
        Item,
        "id",
        [{"id": 1, "size": 2}, {"id": 2, "size": 5}, {"id": 3, "size": 2}],
        Latency.disabled(),
    )
    assert [i.id for i in await service.where(lambda item: item.size == 2)] == [1, 3]
    assert (await service.first_where(lambda item: item.size == 2)).id == 1
    assert await service.first_where(lambda item: item.size == 99) is None


def test_unknown_key_field_is_rejected():
    with pytest.raises(ValueError):
        CrudService("item", Item, "item_id")


@pytest.mark.asyncio
async def test_latency_sleeps_for_configured_delay():
    latency = Latency(list_ms=300, get_ms=200)
    with patch("loyalty_admin_api.app.services.crud_service.asyncio.sleep", new=AsyncMock()) as sleep:
        service = CrudService("item", Item, "id", [{"id": 1}], latency)
        await service.list()
        await service.get_by_id(1)
    assert [call.args[0] for call in sleep.await_args_list] == [0.3, 0.2]


@pytest.mark.asyncio
async def test_disabled_latency_never_sleeps():
    with patch("loyalty_admin_api.app.services.crud_service.asyncio.sleep", new=AsyncMock()) as sleep:
        service = make_service(1)
        await service.list()
        await service.create({})
        await service.delete(1)
    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_ids():
    latency = Latency(create_ms=5)
    service = CrudService("item", Item, "id", [], latency)
    created = await asyncio.gather(*(service.create({"size": n}) for n in range(5)))
    assert sorted(item.id for item in created) == [1, 2, 3, 4, 5]
