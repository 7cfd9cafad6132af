from pydantic import BaseModel, ConfigDict, Field, computed_field

# Display labels for the six standard base stats
STAT_LABELS = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Atk",
    "special-defense": "Sp. Def",
    "speed": "Speed",
}


# --- Raw shapes fetched from PokeAPI (Internal Contract) ---
# Unknown keys are ignored, PokeAPI payloads are much larger than what we read.

class NamedResource(BaseModel):
    name: str


class PokemonSummary(BaseModel):
    name: str
    url: str


class PokemonIndex(BaseModel):
    results: list[PokemonSummary]


class TypeSlot(BaseModel):
    type: NamedResource


class StatEntry(BaseModel):
    base_stat: int
    stat: NamedResource


class AbilityEntry(BaseModel):
    ability: NamedResource
    is_hidden: bool = False


class OfficialArtwork(BaseModel):
    front_default: str | None = None


class OtherSprites(BaseModel):
    # JSON key contains a dash, so keep the alias and expose a Pythonic name
    official_artwork: OfficialArtwork | None = Field(default=None, alias="official-artwork")


class Sprites(BaseModel):
    other: OtherSprites | None = None


class PokemonData(BaseModel):
    id: int
    name: str
    height: int = 0
    weight: int = 0
    types: list[TypeSlot] = []
    stats: list[StatEntry] = []
    abilities: list[AbilityEntry] = []
    sprites: Sprites = Sprites()


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource


class GenusEntry(BaseModel):
    genus: str
    language: NamedResource


class SpeciesData(BaseModel):
    flavor_text_entries: list[FlavorTextEntry] = []
    genera: list[GenusEntry] = []


# --- View models handed to the presentation layer (Public Contract) ---

class CatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    # API order is kept: types[0] is the primary type
    types: list[str]
    sprite: str | None


class Ability(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_hidden: bool


class DetailViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    height: int  # decimetres
    weight: int  # hectograms
    types: list[str]
    stats: dict[str, int]
    abilities: list[Ability]
    sprite: str | None
    flavor_text: str | None = None
    genus: str | None = None

    @computed_field
    @property
    def display_id(self) -> str:
        return f"#{self.id:03d}"

    @computed_field
    @property
    def height_m(self) -> float:
        return self.height / 10

    @computed_field
    @property
    def weight_kg(self) -> float:
        return self.weight / 10

    @computed_field
    @property
    def stat_labels(self) -> dict[str, str]:
        return {name: STAT_LABELS.get(name, name) for name in self.stats}


# Model for the list endpoint
class CatalogResponse(BaseModel):
    items: list[CatalogItem]
    count: int
    query: str = ""


class CatalogStatusResponse(BaseModel):
    status: str
    generation: int
    count: int
