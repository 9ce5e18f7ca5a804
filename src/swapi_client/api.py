"""
Async API wrapper around the Star Wars API endpoints.

Provides a typed interface for:
- Fetching one resource by index (`fetch_one`)
- Listing a collection (`fetch_list`, first page only)
- Fetching several resources concurrently, in request order (`fetch_many`)
- The root document (`fetch_root`, `fetch_root_map`)
- Resolving reference URLs found on entities (`fetch_reference(s)`)

Every method returns frozen models from `models.py` or raises an APIError.
"""
from __future__ import annotations
import asyncio, logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from .endpoints import Resource, ResourceLike, build_url, parse_reference
from .errors import DecodeError, normalize_error
from .http_client import HttpClient
from .models import (
    Entity, Film, Page, Person, Planet, Record, Root, Species, Starship, Vehicle,
    decode, model_for,
)

logger = logging.getLogger(__name__)

class StarWarsAPI:

    def __init__(self, http: HttpClient):
        self.http = http

    async def _get(self, url: str, model: Type[Record]) -> Record:
        body = await self.http.get(url)
        return decode(model, body)

    async def _fan_out(
        self,
        targets: Sequence[Tuple[str, Type[Record]]],
        max_concurrency: Optional[int] = None,
    ) -> List[Record]:
        """
        Run one GET+decode task per target and join them.
        Results keep the order of `targets`. The first failure is raised and the
        tasks still in flight are cancelled; the same happens if the caller is cancelled.
        """
        if not targets:
            return []
        sem = asyncio.Semaphore(max_concurrency) if max_concurrency else None

        async def worker(url: str, model: Type[Record]) -> Record:
            if sem is None:
                return await self._get(url, model)
            async with sem:
                return await self._get(url, model)

        logger.debug("Fetching %d resources concurrently", len(targets))
        tasks = [asyncio.create_task(worker(url, model)) for url, model in targets]
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
            failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
            if failed:
                raise failed[0].exception()
            return [t.result() for t in tasks]
        finally:
            pending = [t for t in tasks if not t.done()]
            for t in pending:
                t.cancel()
            if pending:
                await asyncio.wait(pending)
                for t in pending:
                    if not t.cancelled():
                        t.exception()

    # generic operations
    async def fetch_one(self, kind: ResourceLike, index: int) -> Entity:
        url = build_url(kind, index)
        return await self._get(url, model_for(kind))

    async def fetch_list(self, kind: ResourceLike, *, strict: bool = False) -> List[Entity]:
        """
        First page of a collection. An envelope that does not decode yields []
        unless `strict` is set; transport failures always raise.
        """
        url = build_url(kind)
        model = model_for(kind)
        body = await self.http.get(url)
        try:
            page = decode(Page[model], body)
        except DecodeError as e:
            if strict:
                raise
            logger.warning("Discarding undecodable listing from %s: %s", url, e.reason)
            return []
        if page.next:
            logger.debug("%s has more pages (next=%s); only the first page is returned", url, page.next)
        return list(page.results)

    async def fetch_many(
        self,
        kind: ResourceLike,
        indices: Iterable[int],
        *,
        max_concurrency: Optional[int] = None,
    ) -> List[Entity]:
        model = model_for(kind)
        targets = [(build_url(kind, i), model) for i in indices]
        return await self._fan_out(targets, max_concurrency)

    async def fetch_root(self) -> Root:
        return await self._get(build_url(Resource.ROOT), Root)

    async def fetch_root_map(self) -> Dict[str, str]:
        root = await self.fetch_root()
        return root.as_mapping()

    async def fetch_reference(self, url: str) -> Entity:
        try:
            kind, index = parse_reference(url)
        except ValueError as e:
            raise normalize_error(e) from e
        return await self.fetch_one(kind, index)

    async def fetch_references(
        self,
        urls: Iterable[str],
        *,
        max_concurrency: Optional[int] = None,
    ) -> List[Entity]:
        targets = []
        for url in urls:
            try:
                kind, index = parse_reference(url)
            except ValueError as e:
                raise normalize_error(e) from e
            targets.append((build_url(kind, index), model_for(kind)))
        return await self._fan_out(targets, max_concurrency)

    # people
    async def get_person(self, index: int) -> Person:
        return await self.fetch_one(Resource.PEOPLE, index)

    async def get_person_batch(self, indices: Iterable[int]) -> List[Person]:
        return await self.fetch_many(Resource.PEOPLE, indices)

    async def list_people(self) -> List[Person]:
        return await self.fetch_list(Resource.PEOPLE)

    # films
    async def get_film(self, index: int) -> Film:
        return await self.fetch_one(Resource.FILMS, index)

    async def get_film_batch(self, indices: Iterable[int]) -> List[Film]:
        return await self.fetch_many(Resource.FILMS, indices)

    async def list_films(self) -> List[Film]:
        return await self.fetch_list(Resource.FILMS)

    # starships
    async def get_starship(self, index: int) -> Starship:
        return await self.fetch_one(Resource.STARSHIPS, index)

    async def get_starship_batch(self, indices: Iterable[int]) -> List[Starship]:
        return await self.fetch_many(Resource.STARSHIPS, indices)

    async def list_starships(self) -> List[Starship]:
        return await self.fetch_list(Resource.STARSHIPS)

    # vehicles
    async def get_vehicle(self, index: int) -> Vehicle:
        return await self.fetch_one(Resource.VEHICLES, index)

    async def get_vehicle_batch(self, indices: Iterable[int]) -> List[Vehicle]:
        return await self.fetch_many(Resource.VEHICLES, indices)

    async def list_vehicles(self) -> List[Vehicle]:
        return await self.fetch_list(Resource.VEHICLES)

    # species
    async def get_species(self, index: int) -> Species:
        return await self.fetch_one(Resource.SPECIES, index)

    async def get_species_batch(self, indices: Iterable[int]) -> List[Species]:
        return await self.fetch_many(Resource.SPECIES, indices)

    async def list_species(self) -> List[Species]:
        return await self.fetch_list(Resource.SPECIES)

    # planets
    async def get_planet(self, index: int) -> Planet:
        return await self.fetch_one(Resource.PLANETS, index)

    async def get_planet_batch(self, indices: Iterable[int]) -> List[Planet]:
        return await self.fetch_many(Resource.PLANETS, indices)

    async def list_planets(self) -> List[Planet]:
        return await self.fetch_list(Resource.PLANETS)
