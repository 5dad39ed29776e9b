from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from geoarena.game.types import Continent, Difficulty
from geoarena.geo.errors import DuplicateCountryError, UnknownCountryError
from geoarena.geo.tiers import DEFAULT_TIER, max_tier_for_difficulty
from geoarena.geo.types import Country


class CountryCatalog:
    """Read-only country reference data with the difficulty tier table.

    Everything else in the engine refers to countries by code and looks the
    record up here when a name, capital or continent is needed.
    """

    __slots__ = ("_countries", "_by_code", "_tiers")

    def __init__(self, countries: Iterable[Country], tiers: Mapping[str, int]) -> None:
        ordered = tuple(countries)
        by_code: dict[str, Country] = {}
        for country in ordered:
            if country.code in by_code:
                raise DuplicateCountryError(f"duplicate country code {country.code}")
            by_code[country.code] = country

        unknown = sorted(code for code in tiers if code not in by_code)
        if unknown:
            raise UnknownCountryError(f"tier table references unknown codes: {', '.join(unknown)}")
        bad_tiers = sorted(code for code, tier in tiers.items() if tier not in (1, 2, 3))
        if bad_tiers:
            raise ValueError(f"tier must be 1..3, got invalid tiers for: {', '.join(bad_tiers)}")

        self._countries = ordered
        self._by_code = MappingProxyType(by_code)
        self._tiers = MappingProxyType(dict(tiers))

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(country.code for country in self._countries)

    def get(self, code: str) -> Country | None:
        return self._by_code.get(code)

    def tier(self, code: str) -> int:
        return self._tiers.get(code, DEFAULT_TIER)

    def continent_of(self, code: str) -> str | None:
        country = self._by_code.get(code)
        return country.continent if country is not None else None

    def matches_continent(self, code: str, continent: Continent) -> bool:
        return Continent(continent).matches(self.continent_of(code))

    def pool(
        self,
        *,
        continent: Continent = Continent.ALL,
        difficulty: Difficulty | None = None,
        exclude: Iterable[str] = (),
    ) -> list[str]:
        """Codes in catalog order matching the continent filter and the difficulty tier ceiling."""
        max_tier = max_tier_for_difficulty(difficulty) if difficulty is not None else DEFAULT_TIER
        excluded = set(exclude)
        continent = Continent(continent)
        return [
            country.code
            for country in self._countries
            if country.code not in excluded
            and self.tier(country.code) <= max_tier
            and continent.matches(country.continent)
        ]
