"""Service layer: loaders, search and the catalog snapshot store."""
from .pokemon_service import PokemonService
from .search import filter_catalog
from .catalog_store import CatalogStore, LoadResult, LoadStatus

__all__ = [
    'PokemonService',
    'filter_catalog',
    'CatalogStore',
    'LoadResult',
    'LoadStatus',
]
