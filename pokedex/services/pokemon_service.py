import asyncio
import logging

from pokedex.clients.pokeapi_client import APIClientError, PokeAPIClient, PokemonNotFoundError
from pokedex.models import CatalogItem, DetailViewModel
from pokedex.normalizer import normalize_catalog_item, normalize_detail

logger = logging.getLogger(__name__)


class PokemonService:
    # Service receives the client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def load_catalog(self, limit: int) -> list[CatalogItem]:
        """
        Fetches the index of `limit` Pokemon, then every detail record concurrently.
        All-or-nothing: one failed fetch fails the whole load, no partial catalog is returned.
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        logger.info(f"Loading catalog (limit={limit})")
        try:
            summaries = await self._poke_client.list_pokemon(limit)
            if len(summaries) > limit:
                logger.warning(f"Index returned {len(summaries)} entries for limit={limit}, truncating")
                summaries = summaries[:limit]

            # Fan-out: every detail request is started at once, in index order.
            # gather() returns results in argument order, whatever order they complete in.
            details = await asyncio.gather(
                *(self._poke_client.get_pokemon(summary.url) for summary in summaries)
            )
        except PokemonNotFoundError as e:
            # A dangling index entry is a catalog failure, not a 404 for the caller
            logger.error(f"Catalog load failed: {e.detail}")
            raise APIClientError(detail=f"Catalog load failed: {e.detail}")
        except APIClientError as e:
            logger.error(f"Catalog load failed: {e.detail}")
            raise

        catalog = [normalize_catalog_item(detail) for detail in details]
        ids = [item.id for item in catalog]
        if len(set(ids)) != len(ids):
            duplicates = sorted({pokemon_id for pokemon_id in ids if ids.count(pokemon_id) > 1})
            logger.error(f"Catalog load failed: duplicate ids {duplicates}")
            raise APIClientError(detail=f"Catalog load failed: duplicate Pokemon ids {duplicates}")
        logger.info(f"Loaded catalog with {len(catalog)} Pokemon")
        return catalog

    async def load_detail(self, pokemon_id) -> DetailViewModel:
        """
        Fetches the entity and its species record concurrently and merges them.
        The entity is required; the species only adds flavor text and genus, so its failure is tolerated.
        """
        logger.info(f"Loading detail for Pokemon {pokemon_id}")
        pokemon, species = await asyncio.gather(
            self._poke_client.get_pokemon(pokemon_id),
            self._poke_client.get_species(pokemon_id),
            return_exceptions=True,
        )

        if isinstance(pokemon, BaseException):
            raise pokemon

        if isinstance(species, BaseException):
            if not isinstance(species, Exception):
                raise species
            logger.warning(f"Species fetch failed for Pokemon {pokemon_id}, continuing without it: {species!r}")
            species = None

        return normalize_detail(pokemon, species)
