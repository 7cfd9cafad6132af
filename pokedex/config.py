import os

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_POKEMON_LIMIT = 151
DEFAULT_TIMEOUT = 10.0


def get_base_url() -> str:
    return os.getenv("POKEAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_timeout() -> float | None:
    """Transport timeout in seconds. 0 disables it (a hung request then waits forever)."""
    timeout = float(os.getenv("POKEAPI_TIMEOUT", DEFAULT_TIMEOUT))
    return timeout or None


def get_pokemon_limit() -> int:
    raw = os.getenv("POKEMON_LIMIT", str(DEFAULT_POKEMON_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"POKEMON_LIMIT must be an integer, got {raw!r}")
    if limit < 1:
        raise ValueError(f"POKEMON_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
