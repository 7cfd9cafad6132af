from fastapi import Depends

from pokedex import config
from pokedex.clients import PokeAPIClient
from pokedex.services import CatalogStore, PokemonService

_poke_client = None
_catalog_store = None
_pokemon_limit = None

def configure(pokemon_limit: int):
    """Called once at startup with the validated settings."""
    global _pokemon_limit
    _pokemon_limit = pokemon_limit

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client)

def get_catalog_store(
    service: PokemonService = Depends(get_pokemon_service),
) -> CatalogStore:
    # One store per process, the list screen state outlives a single request
    global _catalog_store
    if _catalog_store is None:
        limit = _pokemon_limit if _pokemon_limit is not None else config.get_pokemon_limit()
        _catalog_store = CatalogStore(service=service, limit=limit)
    return _catalog_store

async def shutdown():
    global _poke_client, _catalog_store
    if _poke_client is not None:
        await _poke_client.close()
    _poke_client = None
    _catalog_store = None
