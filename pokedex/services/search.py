from typing import Sequence

from pokedex.models import CatalogItem


def filter_catalog(catalog: Sequence[CatalogItem], query: str) -> list[CatalogItem]:
    """
    Case-insensitive substring match on name, input order kept.
    The query is not trimmed, an empty query returns every item.
    """
    if not query:
        return list(catalog)
    needle = query.lower()
    return [item for item in catalog if needle in item.name.lower()]
