"""Projection of raw PokeAPI shapes into the view models used by the screens."""
from typing import Iterable, Optional

from pokedex.models import (
    Ability,
    CatalogItem,
    DetailViewModel,
    PokemonData,
    SpeciesData,
)

ENGLISH = "en"


def english_entry(entries: Iterable, language: str = ENGLISH):
    """Returns the first entry whose language matches, or None."""
    return next((entry for entry in entries if entry.language.name == language), None)


def extract_types(raw: PokemonData) -> list[str]:
    return [slot.type.name for slot in raw.types]


def extract_sprite(raw: PokemonData) -> Optional[str]:
    # Missing artwork is passed through as None, the UI decides what to show
    other = raw.sprites.other
    if other is None or other.official_artwork is None:
        return None
    return other.official_artwork.front_default


def clean_flavor_text(text: str) -> str:
    return text.replace("\f", " ").replace("\n", " ")


def normalize_catalog_item(raw: PokemonData) -> CatalogItem:
    return CatalogItem(
        id=raw.id,
        name=raw.name,
        types=extract_types(raw),
        sprite=extract_sprite(raw),
    )


def normalize_detail(raw: PokemonData, species: Optional[SpeciesData] = None) -> DetailViewModel:
    """
    Merges the entity record and its (optional) species record into one model.
    Without species data, or without an English entry, flavor_text and genus stay None.
    """
    flavor_text = None
    genus = None
    if species is not None:
        flavor_entry = english_entry(species.flavor_text_entries)
        if flavor_entry is not None:
            flavor_text = clean_flavor_text(flavor_entry.flavor_text)
        genus_entry = english_entry(species.genera)
        if genus_entry is not None:
            genus = genus_entry.genus

    return DetailViewModel(
        id=raw.id,
        name=raw.name,
        height=raw.height,
        weight=raw.weight,
        types=extract_types(raw),
        stats={entry.stat.name: entry.base_stat for entry in raw.stats},
        abilities=[
            Ability(name=entry.ability.name, is_hidden=entry.is_hidden)
            for entry in raw.abilities
        ],
        sprite=extract_sprite(raw),
        flavor_text=flavor_text,
        genus=genus,
    )
