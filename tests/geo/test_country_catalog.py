from __future__ import annotations

import pytest

from geoarena.game.types import Continent, Difficulty
from geoarena.geo.catalog import CountryCatalog
from geoarena.geo.data import GeoData
from geoarena.geo.errors import DuplicateCountryError, UnknownCountryError
from geoarena.geo.types import Country


def country(code: str, continent: str = "Europe") -> Country:
    return Country(code, f"Name {code}", f"Capital {code}", continent, (0.0, 0.0))


def test_catalog_codes_are_unique(geo: GeoData) -> None:
    assert len(set(geo.catalog.codes)) == len(geo.catalog)


def test_catalog_get_and_continent(geo: GeoData) -> None:
    germany = geo.catalog.get("DE")

    assert germany is not None
    assert germany.name == "Germany"
    assert germany.capital == "Berlin"
    assert geo.catalog.continent_of("DE") == "Europe"
    assert geo.catalog.get("ZZ") is None
    assert geo.catalog.continent_of("ZZ") is None


@pytest.mark.parametrize(
    ("difficulty", "max_tier"),
    [
        (Difficulty.EASY, 1),
        (Difficulty.MEDIUM, 2),
        (Difficulty.HARD, 3),
    ],
)
def test_pool_respects_tier_ceiling(geo: GeoData, difficulty: Difficulty, max_tier: int) -> None:
    pool = geo.catalog.pool(difficulty=difficulty)

    assert pool
    assert all(geo.catalog.tier(code) <= max_tier for code in pool)


def test_pool_filters_continent_and_keeps_catalog_order(geo: GeoData) -> None:
    pool = geo.catalog.pool(continent=Continent.SOUTH_AMERICA, exclude=("BR",))

    assert "BR" not in pool
    assert all(geo.catalog.continent_of(code) == "South America" for code in pool)
    assert pool == [code for code in geo.catalog.codes if code in set(pool)]


def test_easy_pool_is_subset_of_hard_pool(geo: GeoData) -> None:
    easy = set(geo.catalog.pool(continent=Continent.AFRICA, difficulty=Difficulty.EASY))
    hard = set(geo.catalog.pool(continent=Continent.AFRICA, difficulty=Difficulty.HARD))

    assert easy <= hard


def test_catalog_rejects_duplicate_codes() -> None:
    with pytest.raises(DuplicateCountryError, match="AA"):
        CountryCatalog([country("AA"), country("AA")], {})


def test_catalog_rejects_tiers_for_unknown_codes() -> None:
    with pytest.raises(UnknownCountryError, match="BB"):
        CountryCatalog([country("AA")], {"BB": 1})


def test_catalog_rejects_out_of_range_tier() -> None:
    with pytest.raises(ValueError, match="AA"):
        CountryCatalog([country("AA")], {"AA": 4})


def test_unlisted_country_gets_default_tier() -> None:
    catalog = CountryCatalog([country("AA")], {})

    assert catalog.tier("AA") == 3
    assert catalog.pool(difficulty=Difficulty.EASY) == []
    assert catalog.pool(difficulty=Difficulty.HARD) == ["AA"]
