"""
Tests for the partial-update SQL builder
"""
import pytest

from insect_shop.exceptions import InvalidArgument
from insect_shop.helpers.sql import escape_like, sql_for_partial_update


def test_assignments_follow_data_order():
    update = sql_for_partial_update(
        {"image_url": "http://img/a.jpg", "price": 9.99},
        {"price": "price", "image_url": "image_url"}
    )
    
    assert update.assignments == ["image_url = :p1", "price = :p2"]
    assert update.values == ["http://img/a.jpg", 9.99]
    assert update.set_clause == "image_url = :p1, price = :p2"


def test_field_names_are_mapped_to_columns():
    update = sql_for_partial_update(
        {"isAdmin": True, "password": "hashed"},
        {"password": "password_hash", "isAdmin": "is_admin"}
    )
    
    assert update.assignments == ["is_admin = :p1", "password_hash = :p2"]
    assert update.values == [True, "hashed"]


def test_unknown_fields_are_ignored_and_numbering_stays_contiguous():
    update = sql_for_partial_update(
        {"species": "Moth", "price": 3, "id": 99, "image_url": "x"},
        {"price": "price", "image_url": "image_url"}
    )
    
    assert update.assignments == ["price = :p1", "image_url = :p2"]
    assert update.values == [3, "x"]


def test_lookup_key_takes_next_placeholder():
    update = sql_for_partial_update({"price": 1}, {"price": "price"})
    
    assert update.next_placeholder == ":p2"
    assert update.params(42) == {"p1": 1, "p2": 42}


def test_values_never_enter_the_sql():
    hostile = "x'; DROP TABLE insects; --"
    update = sql_for_partial_update({"image_url": hostile}, {"image_url": "image_url"})
    
    assert hostile not in update.set_clause
    assert update.values == [hostile]


def test_escape_like_escapes_wildcards_and_backslash():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
    assert escape_like("Stag Beetle") == "Stag Beetle"


def test_empty_data_is_rejected():
    with pytest.raises(InvalidArgument, match="No data"):
        sql_for_partial_update({}, {"price": "price"})


def test_data_without_allowed_fields_is_rejected():
    with pytest.raises(InvalidArgument):
        sql_for_partial_update({"species": "Moth"}, {"price": "price"})
