"""
Frozen pydantic models for responses from the Star Wars API.

Includes:
- Root: GET /api/ (one collection URL per resource kind)
- Film, Person, Starship, Vehicle, Species, Planet: GET /api/<kind>/<id>
- Page[T]: GET /api/<kind> (the `results` envelope, first page only)

Field names are the wire names. Measurements (height, mass, cost_in_credits,
crew, ...) stay `str` because the API mixes numbers with "unknown" / "n/a".
Cross-references are URL strings and are never resolved here.
"""

from __future__ import annotations
from typing import Dict, Generic, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .endpoints import Resource, ResourceLike, resource_of
from .errors import normalize_error

class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

# GET /api/
class Root(Record):
    films: str
    people: str
    planets: str
    species: str
    starships: str
    vehicles: str

    def as_mapping(self) -> Dict[str, str]:
        return self.model_dump()

# GET /api/films/{id}
class Film(Record):
    title: str
    episode_id: int
    opening_crawl: str
    director: str
    producer: str            # comma separated
    release_date: str        # ISO 8601 date
    species: Tuple[str, ...]
    starships: Tuple[str, ...]
    vehicles: Tuple[str, ...]
    characters: Tuple[str, ...]
    planets: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.title

# GET /api/people/{id}
class Person(Record):
    name: str
    birth_year: str          # BBY / ABY
    eye_color: str
    gender: str
    hair_color: str
    height: str              # cm
    mass: str                # kg
    homeworld: str
    films: Tuple[str, ...]
    species: Tuple[str, ...]
    starships: Tuple[str, ...]
    vehicles: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.name

# GET /api/starships/{id}
class Starship(Record):
    name: str
    model: str
    starship_class: str
    manufacturer: str
    cost_in_credits: str
    length: str
    crew: str
    passengers: str
    max_atmosphering_speed: str
    hyperdrive_rating: str
    MGLT: str                # megalights per hour
    cargo_capacity: str
    consumables: str
    films: Tuple[str, ...]
    pilots: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.name

# GET /api/vehicles/{id}
class Vehicle(Record):
    name: str
    model: str
    vehicle_class: str
    manufacturer: str
    length: str
    cost_in_credits: str
    crew: str
    passengers: str
    max_atmosphering_speed: str
    cargo_capacity: str
    consumables: str
    films: Tuple[str, ...]
    pilots: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.name

# GET /api/species/{id}
class Species(Record):
    name: str
    classification: str
    designation: str
    average_height: str
    average_lifespan: str
    eye_colors: str
    hair_colors: str
    skin_colors: str
    language: str
    homeworld: Optional[str] = None   # null for species without a recorded homeworld
    people: Tuple[str, ...]
    films: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.name

# GET /api/planets/{id}
class Planet(Record):
    name: str
    diameter: str
    rotation_period: str
    orbital_period: str
    gravity: str
    population: str
    climate: str
    terrain: str
    surface_water: str
    residents: Tuple[str, ...]
    films: Tuple[str, ...]
    url: str
    created: str
    edited: str

    @property
    def id(self) -> str:
        return self.name

Entity = Union[Film, Person, Starship, Vehicle, Species, Planet]
T = TypeVar("T")

# GET /api/{kind}
class Page(Record, Generic[T]):
    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: Tuple[T, ...]

ENTITY_MODELS: Dict[Resource, Type[Record]] = {
    Resource.FILMS: Film,
    Resource.PEOPLE: Person,
    Resource.STARSHIPS: Starship,
    Resource.VEHICLES: Vehicle,
    Resource.SPECIES: Species,
    Resource.PLANETS: Planet,
}

M = TypeVar("M", bound=BaseModel)

def model_for(kind: ResourceLike) -> Type[Record]:
    resource = resource_of(kind)
    assert resource in ENTITY_MODELS, "the root document is fetched with fetch_root()"
    return ENTITY_MODELS[resource]

def decode(model: Type[M], body: Union[bytes, str]) -> M:
    """Parse a JSON body into `model`; raises DecodeError on bad JSON or schema mismatch."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise normalize_error(e) from e
