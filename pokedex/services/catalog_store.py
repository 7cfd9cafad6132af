"""
Holds the last committed catalog snapshot for the list screen.

Each reload is tagged with a generation token. Only the result carrying the latest
token is committed, so an older request finishing late can never overwrite a newer one.
Failures are returned as a LoadResult rather than raised; whether the previous snapshot
survives a failed reload is decided by `keep_stale`.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException

from pokedex.models import CatalogItem
from pokedex.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)


class LoadStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    REFRESHING = "refreshing"
    ERROR = "error"


@dataclass(frozen=True)
class LoadResult:
    token: int
    catalog: Optional[tuple[CatalogItem, ...]] = None
    error: Optional[HTTPException] = None
    committed: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class CatalogStore:
    def __init__(self, service: PokemonService, limit: int, keep_stale: bool = True):
        self._service = service
        self._limit = limit
        self.keep_stale = keep_stale
        self._generation = 0
        self._snapshot: Optional[tuple[CatalogItem, ...]] = None
        self.status = LoadStatus.IDLE
        self.last_error: Optional[HTTPException] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def snapshot(self) -> Optional[tuple[CatalogItem, ...]]:
        return self._snapshot

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    async def reload(self) -> LoadResult:
        self._generation += 1
        token = self._generation
        self.status = LoadStatus.REFRESHING if self.has_snapshot else LoadStatus.LOADING

        try:
            catalog = tuple(await self._service.load_catalog(self._limit))
        except HTTPException as e:
            return self._commit_failure(token, e)
        except BaseException:
            # Anything else (bad limit, cancellation) still propagates, but the store leaves its loading state
            if token == self._generation:
                self.status = LoadStatus.ERROR
            raise

        if token != self._generation:
            logger.info(f"Discarding stale catalog load (token {token}, latest {self._generation})")
            return LoadResult(token=token, catalog=catalog)

        self._snapshot = catalog
        self.last_error = None
        self.status = LoadStatus.IDLE
        return LoadResult(token=token, catalog=catalog, committed=True)

    def _commit_failure(self, token: int, error: HTTPException) -> LoadResult:
        if token != self._generation:
            logger.info(f"Ignoring failure of stale catalog load (token {token})")
            return LoadResult(token=token, error=error)

        logger.warning(f"Catalog reload failed, keep_stale={self.keep_stale}: {error.detail}")
        if not self.keep_stale:
            self._snapshot = None
        self.last_error = error
        self.status = LoadStatus.ERROR
        return LoadResult(token=token, error=error, committed=True)
