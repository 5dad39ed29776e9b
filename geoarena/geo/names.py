from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from typing import Protocol

from geoarena.geo.catalog import CountryCatalog

DEFAULT_LOCALE = "en"

# locale -> country code -> display name
LocalizedNames = Mapping[str, Mapping[str, str]]


def normalize_answer(text: str) -> str:
    """Trim, case-fold and strip combining accents for answer comparison."""
    decomposed = unicodedata.normalize("NFD", text.strip().casefold())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


class NameResolver(Protocol):
    def resolve_country(self, text: str, locale: str | None = None) -> str | None: ...

    def country_name(self, code: str, locale: str | None = None) -> str: ...

    def capital_name(self, code: str, locale: str | None = None) -> str: ...


class CatalogNameResolver:
    """Resolves free text to country codes and codes to display names.

    English names come from the catalog; other locales come from the injected
    tables and fall back to English per code.
    """

    __slots__ = ("_catalog", "_country_names", "_capital_names", "_english_index", "_locale_indexes")

    def __init__(
        self,
        catalog: CountryCatalog,
        *,
        country_names: LocalizedNames | None = None,
        capital_names: LocalizedNames | None = None,
    ) -> None:
        self._catalog = catalog
        self._country_names: LocalizedNames = country_names or {}
        self._capital_names: LocalizedNames = capital_names or {}
        self._english_index = {normalize_answer(country.name): country.code for country in catalog.countries}
        self._locale_indexes = {
            locale: {normalize_answer(name): code for code, name in names.items() if code in catalog}
            for locale, names in self._country_names.items()
        }

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted({DEFAULT_LOCALE, *self._country_names}))

    def resolve_country(self, text: str, locale: str | None = None) -> str | None:
        trimmed = text.strip()
        if not trimmed:
            return None

        as_code = trimmed.upper()
        if as_code in self._catalog:
            return as_code

        normalized = normalize_answer(trimmed)
        by_name = self._english_index.get(normalized)
        if by_name is not None:
            return by_name

        if locale is not None:
            index = self._locale_indexes.get(locale)
            if index is not None:
                return index.get(normalized)
        return None

    def country_name(self, code: str, locale: str | None = None) -> str:
        localized = self._country_names.get(locale or DEFAULT_LOCALE, {}).get(code)
        if localized:
            return localized
        country = self._catalog.get(code)
        return country.name if country is not None else code

    def capital_name(self, code: str, locale: str | None = None) -> str:
        localized = self._capital_names.get(locale or DEFAULT_LOCALE, {}).get(code)
        if localized:
            return localized
        country = self._catalog.get(code)
        return country.capital if country is not None else ""

    def all_country_names(self, locale: str | None = None) -> list[str]:
        return [self.country_name(country.code, locale) for country in self._catalog.countries]

    def all_capital_names(self, locale: str | None = None) -> list[str]:
        return sorted({self.capital_name(country.code, locale) for country in self._catalog.countries})
