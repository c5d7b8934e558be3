"""Country data exposed as two parallel collections.

The data comes from pycountry's ISO 3166-1 database. It is exposed two ways:
- Records.countries() returns immutable CountryRecord tuples
- References.countries() returns mutable Country objects

Both collections list the same countries in the same order (case- and
accent-insensitive by display name). The identifier is the ISO numeric code.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Iterator
from typing import NamedTuple, TypeVar

import pycountry


class CountryRecord(NamedTuple):
    """Record-style country: immutable, lower-case fields."""

    id: int
    name: str
    alpha_2: str
    alpha_3: str


class Country:
    """Class-style country with mutable attributes."""

    def __init__(self, id: int, name: str, alpha_2: str = "", alpha_3: str = "") -> None:
        self.id = id
        self.name = name
        self.alpha_2 = alpha_2
        self.alpha_3 = alpha_3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return (self.id, self.name) == (other.id, other.name)

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Country(id={self.id!r}, name={self.name!r})"

    def __str__(self) -> str:
        return self.name


def display_name(entry) -> str:
    """Prefer the common name ("Bolivia") over the formal one."""
    return getattr(entry, "common_name", None) or entry.name


def sort_key(name: str) -> str:
    """Case- and accent-insensitive key, so "Åland Islands" sorts with the A's."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _provider_entries() -> Iterator[tuple[int, str, str, str]]:
    rows = [
        (int(entry.numeric), display_name(entry), entry.alpha_2, entry.alpha_3)
        for entry in pycountry.countries
    ]
    rows.sort(key=lambda row: sort_key(row[1]))
    yield from rows


class Records:
    """Source of CountryRecord values."""

    @staticmethod
    def countries() -> list[CountryRecord]:
        return [CountryRecord(*row) for row in _provider_entries()]


class References:
    """Source of Country objects."""

    @staticmethod
    def countries() -> list[Country]:
        return [Country(*row) for row in _provider_entries()]


T = TypeVar("T", CountryRecord, Country)


def find_by_id(countries: Iterable[T], country_id: int) -> T | None:
    """Return the first country with a matching identifier, or None."""
    for country in countries:
        if country.id == country_id:
            return country
    return None
