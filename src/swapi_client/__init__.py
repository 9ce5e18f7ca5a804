"""
Typed async client for the read-only Star Wars API (https://swapi.dev/api).

    async with HttpClient() as http:
        api = StarWarsAPI(http)
        luke = await api.get_person(1)
        crew = await api.fetch_many("people", [1, 2, 3])
"""
from .api import StarWarsAPI
from .config import ClientConfig
from .endpoints import BASE_URL, Resource, build_url, parse_reference
from .errors import APIError, DecodeError, TransportError, normalize_error
from .http_client import HttpClient
from .models import Entity, Film, Page, Person, Planet, Root, Species, Starship, Vehicle, decode

__all__ = [
    "StarWarsAPI", "HttpClient", "ClientConfig",
    "Resource", "BASE_URL", "build_url", "parse_reference",
    "APIError", "TransportError", "DecodeError", "normalize_error",
    "Entity", "Root", "Film", "Person", "Starship", "Vehicle", "Species", "Planet", "Page", "decode",
]
