from __future__ import annotations

import pytest

from geoarena.geo.data import GeoData
from geoarena.geo.names import normalize_answer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Germany ", "germany"),
        ("CÔTE D'IVOIRE", "cote d'ivoire"),
        ("Österreich", "osterreich"),
        ("", ""),
    ],
)
def test_normalize_answer(raw: str, expected: str) -> None:
    assert normalize_answer(raw) == expected


@pytest.mark.parametrize(
    ("text", "locale", "expected"),
    [
        ("de", None, "DE"),
        ("DE", None, "DE"),
        ("germany", None, "DE"),
        ("  GERMANY  ", "de", "DE"),
        ("Deutschland", "de", "DE"),
        ("osterreich", "de", "AT"),
        ("Deutschland", None, None),
        ("Deutschland", "fr", None),
        ("Atlantis", None, None),
        ("   ", None, None),
    ],
)
def test_resolve_country(geo: GeoData, text: str, locale: str | None, expected: str | None) -> None:
    assert geo.names.resolve_country(text, locale) == expected


def test_display_names_fall_back_to_english(geo: GeoData) -> None:
    assert geo.names.country_name("DE", "de") == "Deutschland"
    assert geo.names.country_name("IT", "de") == "Italy"
    assert geo.names.country_name("IT") == "Italy"
    assert geo.names.capital_name("AT", "de") == "Wien"
    assert geo.names.capital_name("FR", "de") == "Paris"


def test_autocomplete_lists(geo: GeoData) -> None:
    countries = geo.names.all_country_names("de")
    capitals = geo.names.all_capital_names()

    assert len(countries) == len(geo.catalog)
    assert "Deutschland" in countries
    assert "Germany" not in countries
    assert capitals == sorted(set(capitals))
    assert "Washington, D.C." in capitals


def test_locales_include_english(geo: GeoData) -> None:
    assert geo.names.locales == ("de", "en")
