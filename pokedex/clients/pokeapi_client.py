import logging

import httpx
from fastapi import HTTPException
from pydantic import ValidationError

from pokedex import config
from pokedex.models import PokemonData, PokemonIndex, PokemonSummary, SpeciesData

logger = logging.getLogger(__name__)

# Define a custom exception for client errors (network, 5xx, malformed payloads)
class APIClientError(HTTPException):
    def __init__(self, detail: str, status_code: int = 503):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")


class PokemonNotFoundError(HTTPException):
    def __init__(self, identifier):
        super().__init__(status_code=404, detail=f"Pokemon '{identifier}' not found.")


class PokeAPIClient:
    """Thin async wrapper around PokeAPI. Every call goes to the network, nothing is cached."""

    def __init__(self, base_url: str = None, timeout: float = None, client: httpx.AsyncClient = None):
        # Use environment configuration if not provided
        if base_url is None:
            base_url = config.get_base_url()
        if timeout is None:
            timeout = config.get_timeout()
        self.base_url = base_url
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def fetch_json(self, url: str):
        """GET + JSON decode with error mapping. Accepts a relative path or an absolute URL."""
        logger.debug(f"Fetching {url}")
        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.error(f"PokeAPI returned 404 for {url}")
                raise PokemonNotFoundError(url)
            logger.error(f"PokeAPI failed with status {e.response.status_code} for {url}")
            raise APIClientError(detail=f"PokeAPI failed with status {e.response.status_code}")
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {url}: {e!r}")
            raise APIClientError(detail=f"PokeAPI network error: {str(e)}")
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for {url}")
            raise APIClientError(detail="PokeAPI returned an unexpected response format.")

    @staticmethod
    def _parse(model, data, url: str):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected payload shape from {url}: {e.error_count()} errors")
            raise APIClientError(detail="PokeAPI returned an unexpected response format.")

    async def list_pokemon(self, limit: int) -> list[PokemonSummary]:
        """Fetches the name/url index of the first `limit` Pokemon."""
        url = f"/pokemon?limit={limit}"
        data = await self.fetch_json(url)
        return self._parse(PokemonIndex, data, url).results

    async def get_pokemon(self, id_or_url) -> PokemonData:
        """Fetches one entity record by id, name, or the absolute url handed out by the index."""
        if isinstance(id_or_url, str) and id_or_url.startswith(("http://", "https://")):
            url = id_or_url
        else:
            url = f"/pokemon/{str(id_or_url).lower()}"
        try:
            data = await self.fetch_json(url)
        except PokemonNotFoundError:
            raise PokemonNotFoundError(id_or_url)
        return self._parse(PokemonData, data, url)

    async def get_species(self, pokemon_id) -> SpeciesData:
        url = f"/pokemon-species/{str(pokemon_id).lower()}"
        try:
            data = await self.fetch_json(url)
        except PokemonNotFoundError:
            raise PokemonNotFoundError(pokemon_id)
        return self._parse(SpeciesData, data, url)

    async def close(self):
        """Close the HTTP transport (call on app shutdown)."""
        await self.client.aclose()
