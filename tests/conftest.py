from __future__ import annotations

import pytest

from geoarena.geo.data import GeoData, load_geo_data


@pytest.fixture(scope="session")
def geo() -> GeoData:
    return load_geo_data(
        country_names={"de": {"DE": "Deutschland", "ES": "Spanien", "FR": "Frankreich", "AT": "Österreich"}},
        capital_names={"de": {"AT": "Wien", "DE": "Berlin"}},
    )
