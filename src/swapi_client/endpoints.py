"""
URL construction for the Star Wars API.

- `Resource`: the seven addressable resource kinds
- `build_url`: (kind, index?) -> fully qualified request URL
- `parse_reference`: reference string found on an entity -> (kind, index)

Scheme, host and root path are fixed; nothing here performs I/O.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, Union
from urllib.parse import urlsplit

SCHEME = "https"
HOST = "swapi.dev"
ROOT_PATH = "/api"
BASE_URL = f"{SCHEME}://{HOST}{ROOT_PATH}"

class Resource(str, Enum):
    ROOT = "root"
    PEOPLE = "people"
    FILMS = "films"
    STARSHIPS = "starships"
    VEHICLES = "vehicles"
    SPECIES = "species"
    PLANETS = "planets"

_KINDS = {r.value for r in Resource}

ResourceLike = Union[Resource, str]

def resource_of(kind: ResourceLike) -> Resource:
    assert kind in _KINDS, f"unknown resource kind: {kind!r}"
    return Resource(kind)

def build_url(kind: ResourceLike, index: Optional[int] = None) -> str:
    """
    Root: https://swapi.dev/api/
    Collection: https://swapi.dev/api/<kind>
    Single resource: https://swapi.dev/api/<kind>/<index>
    """
    resource = resource_of(kind)
    if resource is Resource.ROOT:
        assert index is None, "the root document has no indexed resources"
        return BASE_URL + "/"

    url = f"{BASE_URL}/{resource.value}"
    if index is not None:
        assert isinstance(index, int) and not isinstance(index, bool) and index > 0, \
            f"index must be a positive int, got {index!r}"
        url += f"/{index}"
    return url

def parse_reference(url: str) -> Tuple[Resource, int]:
    """
    Split a single-resource reference such as `http://swapi.dev/api/planets/1/`
    into `(Resource.PLANETS, 1)`. The API emits both http and https references
    with a trailing slash; either form is accepted.
    """
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or parts.netloc != HOST:
        raise ValueError(f"not a {HOST} reference: {url!r}")
    if not parts.path.startswith(ROOT_PATH + "/"):
        raise ValueError(f"reference outside {ROOT_PATH}: {url!r}")

    segments = parts.path[len(ROOT_PATH):].strip("/").split("/")
    if len(segments) != 2 or segments[0] not in _KINDS or segments[0] == Resource.ROOT.value:
        raise ValueError(f"not a single-resource reference: {url!r}")
    if not segments[1].isdigit() or int(segments[1]) < 1:
        raise ValueError(f"bad resource index in reference: {url!r}")
    return Resource(segments[0]), int(segments[1])
