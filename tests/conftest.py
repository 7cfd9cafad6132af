import pytest

BASE_URL = "https://pokeapi.co/api/v2"


def pokemon_payload(pokemon_id, name, types=("normal",), sprite="default", stats=None, abilities=None):
    """Builds a trimmed-down /pokemon/{id} payload in the shape PokeAPI returns."""
    if sprite == "default":
        sprite = f"https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/{pokemon_id}.png"
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "base_experience": 64,
        "types": [{"slot": i + 1, "type": {"name": t, "url": ""}} for i, t in enumerate(types)],
        "stats": stats if stats is not None else [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack"}},
        ],
        "abilities": abilities if abilities is not None else [
            {"ability": {"name": "overgrow"}, "is_hidden": False, "slot": 1},
        ],
        "sprites": {
            "front_default": "ignored.png",
            "other": {"official-artwork": {"front_default": sprite}},
        },
    }


def species_payload(flavor_texts=(), genera=()):
    return {
        "flavor_text_entries": [
            {"flavor_text": text, "language": {"name": lang}, "version": {"name": "red"}}
            for lang, text in flavor_texts
        ],
        "genera": [{"genus": genus, "language": {"name": lang}} for lang, genus in genera],
    }


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def make_pokemon():
    return pokemon_payload


@pytest.fixture
def make_species():
    return species_payload
