"""Tests for the two country collections."""

from __future__ import annotations

import dataclasses

import pytest

from countries_forms.core.countries import (
    Country,
    CountryRecord,
    Records,
    References,
    find_by_id,
    sort_key,
)


def test_collections_are_parallel():
    records = Records.countries()
    classes = References.countries()

    assert records
    assert [r.id for r in records] == [c.id for c in classes]
    assert [r.name for r in records] == [c.name for c in classes]


def test_ids_are_unique():
    ids = [r.id for r in Records.countries()]
    assert len(ids) == len(set(ids))


def test_sorted_by_name():
    names = [r.name for r in Records.countries()]
    assert names == sorted(names, key=sort_key)


def test_accented_names_sort_with_their_letter():
    names = [r.name for r in Records.countries()]
    assert names[0] == "Afghanistan"
    assert names[1] == "Åland Islands"
    assert names[-1] == "Zimbabwe"
    assert names.index("Côte d'Ivoire") < names.index("Croatia")


def test_sort_key_ignores_case_and_accents():
    assert sort_key("Åland Islands") == "aland islands"
    assert sort_key("Curaçao") == sort_key("CURACAO")


def test_each_call_returns_a_fresh_list():
    first = References.countries()
    first[0].name = "Changed"
    assert References.countries()[0].name != "Changed"


def test_record_is_immutable():
    record = Records.countries()[0]
    assert isinstance(record, CountryRecord)
    with pytest.raises(AttributeError):
        record.name = "Elsewhere"  # type: ignore[misc]


def test_class_is_mutable():
    country = References.countries()[0]
    assert isinstance(country, Country)
    assert not dataclasses.is_dataclass(country)
    country.name = "Elsewhere"
    assert country.name == "Elsewhere"


def test_identifier_is_iso_numeric():
    germany = find_by_id(Records.countries(), 276)
    assert germany is not None
    assert germany.name == "Germany"
    assert germany.alpha_2 == "DE"
    assert germany.alpha_3 == "DEU"


def test_common_name_preferred():
    bolivia = find_by_id(References.countries(), 68)
    assert bolivia is not None
    assert bolivia.name == "Bolivia"


def test_find_by_id_missing():
    assert find_by_id(Records.countries(), -1) is None


def test_country_equality_and_repr():
    a = Country(276, "Germany", "DE", "DEU")
    b = Country(276, "Germany")
    assert a == b
    with pytest.raises(TypeError):
        hash(a)
    assert a != Country(250, "France")
    assert repr(a) == "Country(id=276, name='Germany')"
    assert str(a) == "Germany"


def test_country_found_in_list_after_mutation():
    country = Country(276, "Germany")
    countries = [country]
    country.name = "Deutschland"
    assert find_by_id(countries, 276) is country
    with pytest.raises(TypeError):
        {country}
