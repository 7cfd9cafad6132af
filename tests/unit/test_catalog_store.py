import asyncio

import pytest
from unittest.mock import AsyncMock
from pokedex.clients.pokeapi_client import APIClientError
from pokedex.models import CatalogItem
from pokedex.services.catalog_store import CatalogStore, LoadStatus

BULBASAUR = CatalogItem(id=1, name="bulbasaur", types=["grass", "poison"], sprite="1.png")
IVYSAUR = CatalogItem(id=2, name="ivysaur", types=["grass", "poison"], sprite="2.png")


@pytest.fixture
def service():
    return AsyncMock()

@pytest.fixture
def store(service):
    return CatalogStore(service=service, limit=151)


@pytest.mark.asyncio
async def test_successful_reload_commits_snapshot(store, service):
    service.load_catalog.return_value = [BULBASAUR]

    result = await store.reload()

    service.load_catalog.assert_called_once_with(151)
    assert result.ok
    assert result.committed
    assert store.snapshot == (BULBASAUR,)
    assert store.status is LoadStatus.IDLE
    assert store.generation == 1

@pytest.mark.asyncio
async def test_failed_reload_keeps_previous_snapshot(store, service):
    service.load_catalog.return_value = [BULBASAUR]
    await store.reload()

    service.load_catalog.side_effect = APIClientError(detail="PokeAPI network error")
    result = await store.reload()

    assert not result.ok
    assert result.error.status_code == 503
    # Stale but valid data stays visible
    assert store.snapshot == (BULBASAUR,)
    assert store.status is LoadStatus.ERROR
    assert store.last_error is result.error

@pytest.mark.asyncio
async def test_failed_reload_clears_snapshot_when_asked(service):
    store = CatalogStore(service=service, limit=151, keep_stale=False)
    service.load_catalog.return_value = [BULBASAUR]
    await store.reload()

    service.load_catalog.side_effect = APIClientError(detail="PokeAPI network error")
    await store.reload()

    assert store.snapshot is None
    assert not store.has_snapshot

@pytest.mark.asyncio
async def test_next_success_replaces_snapshot_and_clears_error(store, service):
    service.load_catalog.side_effect = [
        [BULBASAUR],
        APIClientError(detail="boom"),
        [IVYSAUR],
    ]

    await store.reload()
    await store.reload()
    await store.reload()

    # Replaced, never merged
    assert store.snapshot == (IVYSAUR,)
    assert store.last_error is None
    assert store.status is LoadStatus.IDLE

@pytest.mark.asyncio
async def test_status_while_loading(store, service):
    seen = []

    async def load(limit):
        seen.append(store.status)
        return [BULBASAUR]

    service.load_catalog.side_effect = load

    await store.reload()
    await store.reload()

    assert seen == [LoadStatus.LOADING, LoadStatus.REFRESHING]

@pytest.mark.asyncio
async def test_stale_result_is_discarded(store, service):
    """An older reload finishing after a newer one must not overwrite it."""
    release_first = asyncio.Event()

    async def load(limit):
        if service.load_catalog.call_count == 1:
            await release_first.wait()
            return [BULBASAUR]
        return [IVYSAUR]

    service.load_catalog.side_effect = load

    first = asyncio.create_task(store.reload())
    await asyncio.sleep(0)
    second = await store.reload()
    release_first.set()
    first_result = await first

    assert second.committed
    assert not first_result.committed
    assert first_result.token == 1
    assert second.token == 2
    assert store.snapshot == (IVYSAUR,)

@pytest.mark.asyncio
async def test_stale_failure_does_not_touch_state(store, service):
    release_first = asyncio.Event()

    async def load(limit):
        if service.load_catalog.call_count == 1:
            await release_first.wait()
            raise APIClientError(detail="late failure")
        return [IVYSAUR]

    service.load_catalog.side_effect = load

    first = asyncio.create_task(store.reload())
    await asyncio.sleep(0)
    await store.reload()
    release_first.set()
    first_result = await first

    assert not first_result.ok
    assert not first_result.committed
    assert store.status is LoadStatus.IDLE
    assert store.last_error is None
    assert store.snapshot == (IVYSAUR,)

@pytest.mark.asyncio
async def test_unexpected_error_does_not_leave_store_loading(store, service):
    service.load_catalog.side_effect = ValueError("limit must be positive, got 0")

    with pytest.raises(ValueError):
        await store.reload()

    assert store.status is LoadStatus.ERROR
    assert store.snapshot is None

@pytest.mark.asyncio
async def test_cancelled_reload_does_not_leave_store_refreshing(store, service):
    service.load_catalog.return_value = [BULBASAUR]
    await store.reload()
    started = asyncio.Event()

    async def hang(limit):
        started.set()
        await asyncio.Event().wait()

    service.load_catalog.side_effect = hang

    task = asyncio.create_task(store.reload())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert store.status is LoadStatus.ERROR
    assert store.snapshot == (BULBASAUR,)
