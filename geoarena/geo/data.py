from __future__ import annotations

from dataclasses import dataclass

import structlog

from geoarena.game.types import Continent
from geoarena.geo.adjacency import ADJACENCY
from geoarena.geo.catalog import CountryCatalog
from geoarena.geo.countries import COUNTRIES
from geoarena.geo.graph import ContinentFilter, CountryGraph
from geoarena.geo.names import CatalogNameResolver, LocalizedNames, NameResolver
from geoarena.geo.tiers import COUNTRY_TIERS

logger = structlog.get_logger("geoarena.geo.data")


@dataclass(frozen=True, slots=True)
class GeoData:
    """Catalog, border graph and name resolver, built once and shared read-only."""

    catalog: CountryCatalog
    graph: CountryGraph
    names: NameResolver

    def continent_filter(self, continent: Continent) -> ContinentFilter:
        continent = Continent(continent)
        return lambda code: self.catalog.matches_continent(code, continent)


def load_geo_data(
    *,
    country_names: LocalizedNames | None = None,
    capital_names: LocalizedNames | None = None,
) -> GeoData:
    catalog = CountryCatalog(COUNTRIES, COUNTRY_TIERS)
    graph = CountryGraph(ADJACENCY, known_codes=catalog.codes)
    names = CatalogNameResolver(
        catalog,
        country_names=country_names,
        capital_names=capital_names,
    )
    logger.info(
        "geo_data_loaded",
        countries=len(catalog),
        connected=len(graph.connected_codes),
        locales=list(names.locales),
    )
    return GeoData(catalog=catalog, graph=graph, names=names)
