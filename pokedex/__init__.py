"""Pokemon catalog and detail views aggregated from PokeAPI."""
