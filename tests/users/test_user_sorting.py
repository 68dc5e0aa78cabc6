from __future__ import annotations

import pytest

from school_dashboard.core.enums import SortDirection
from school_dashboard.core.exceptions import ValidationError
from school_dashboard.users.sorting import SortConfig, parse_sort, sort_people, toggle_sort


def test_toggle_same_column_flips_to_descending():
    config = toggle_sort(None, "full_name")
    assert config == SortConfig("full_name", SortDirection.ASC)

    config = toggle_sort(config, "full_name")
    assert config.direction == SortDirection.DESC

    # desc -> asc again, and a new column always starts ascending
    assert toggle_sort(config, "full_name").direction == SortDirection.ASC
    assert toggle_sort(config, "role") == SortConfig("role", SortDirection.ASC)


def test_unknown_column_is_rejected():
    with pytest.raises(ValidationError):
        toggle_sort(None, "password")
    with pytest.raises(ValidationError):
        parse_sort("full_name", "sideways")


def test_no_config_keeps_store_order(students, staff):
    people = students + staff

    assert sort_people(people, None) == people


def test_sort_by_name_both_directions(staff):
    asc = sort_people(staff, SortConfig("full_name"))
    desc = sort_people(staff, SortConfig("full_name", SortDirection.DESC))

    assert [p.document_number for p in asc] == ["45480502", "10203040", "08046665"]
    assert desc == list(reversed(asc))


def test_sort_by_role_label(students, staff):
    people = sort_people([staff[0], students[0], staff[1]], SortConfig("role"))

    assert [p.document_number for p in people] == ["10203040", "45480502", "70000001"]
