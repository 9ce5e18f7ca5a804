import pytest

from swapi_fixtures import API, PEOPLE, ROOT, LUKE, C3PO, R2D2, A_NEW_HOPE, CR90, SAND_CRAWLER, DROID, TATOOINE, page, mock_transport

@pytest.fixture
def routes():
    return {
        f"{API}/": ROOT,
        **{f"{API}/people/{i}": p for i, p in PEOPLE.items()},
        f"{API}/people": page(LUKE, C3PO, R2D2, next_url=f"{API}/people/?page=2"),
        f"{API}/films/1": A_NEW_HOPE,
        f"{API}/films": page(A_NEW_HOPE),
        f"{API}/starships/2": CR90,
        f"{API}/starships": page(CR90),
        f"{API}/vehicles/4": SAND_CRAWLER,
        f"{API}/vehicles": page(SAND_CRAWLER),
        f"{API}/species/2": DROID,
        f"{API}/species": page(DROID),
        f"{API}/planets/1": TATOOINE,
        f"{API}/planets": page(TATOOINE),
    }

@pytest.fixture
def transport(routes):
    return mock_transport(routes)
