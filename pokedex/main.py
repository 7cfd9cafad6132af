import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query

from pokedex import config
from pokedex.dependencies import configure, get_catalog_store, get_pokemon_service, shutdown
from pokedex.models import CatalogResponse, CatalogStatusResponse, DetailViewModel
from pokedex.services import CatalogStore, PokemonService, filter_catalog

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Invalid settings abort startup instead of failing the first request
    pokemon_limit = config.get_pokemon_limit()
    logger.info(f"Starting with POKEMON_LIMIT={pokemon_limit}")
    configure(pokemon_limit)
    yield
    await shutdown()


app = FastAPI(
    title="Pokedex Catalog API",
    description="Browsable Pokemon catalog and detail views aggregated from PokeAPI.",
    lifespan=lifespan,
)


# Endpoint 1: Catalog list with search
@app.get(
    "/pokemon",
    response_model=CatalogResponse,
    summary="Returns the catalog, optionally narrowed by a name search",
)
async def list_pokemon(
    search: str = Query("", description="Case-insensitive substring of the Pokemon name"),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Loads the catalog on first use, then serves the current snapshot."""
    if not store.has_snapshot:
        result = await store.reload()
        # A failed first load leaves nothing to show
        if not store.has_snapshot:
            raise result.error or HTTPException(status_code=503, detail="Catalog is not available.")

    items = filter_catalog(store.snapshot, search)
    return CatalogResponse(items=items, count=len(items), query=search)


# Endpoint 2: Explicit refresh
@app.post(
    "/pokemon/refresh",
    response_model=CatalogStatusResponse,
    summary="Reloads the catalog from PokeAPI",
)
async def refresh_pokemon(store: CatalogStore = Depends(get_catalog_store)):
    """On failure the previous snapshot stays in place and the error is reported as 503."""
    result = await store.reload()
    if not result.ok:
        raise HTTPException(status_code=503, detail=result.error.detail)
    return _status(store)


# Endpoint 3: Loader status
@app.get(
    "/pokemon/status",
    response_model=CatalogStatusResponse,
    summary="Returns the catalog load status",
)
async def catalog_status(store: CatalogStore = Depends(get_catalog_store)):
    return _status(store)


# Endpoint 4: Detail view
@app.get(
    "/pokemon/{pokemon_id}",
    response_model=DetailViewModel,
    summary="Returns the detail view of one Pokemon",
)
async def get_pokemon_detail(
    pokemon_id: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Joins the entity and species records. Errors (404, 503) are raised by the client as HTTPExceptions."""
    return await service.load_detail(pokemon_id)


def _status(store: CatalogStore) -> CatalogStatusResponse:
    return CatalogStatusResponse(
        status=store.status.value,
        generation=store.generation,
        count=len(store.snapshot or ()),
    )
