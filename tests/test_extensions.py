from __future__ import annotations

import pytest

from countries_forms.core.extensions import last, yes_no


@pytest.mark.parametrize(("value", "expected"), [(True, "Yes"), (False, "No")])
def test_yes_no(value, expected):
    assert yes_no(value) == expected


def test_last_of_list_and_tuple():
    assert last([1, 2, 3]) == 3
    assert last(("a", "b")) == "b"


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        last([])
