from __future__ import annotations

import pytest

from src.school_erp.school_erp.store.memory_store import InMemoryGridStore
from src.school_erp.school_erp.store.schema import Book, class_sheet_name


def test_missing_sheet_reads_as_empty():
    store = InMemoryGridStore()

    assert store.get_rows(Book.FEES, "Collection_Log") == []
    assert store.get_headers(Book.FEES, "Collection_Log") == []
    assert store.sheet_exists(Book.FEES, "Collection_Log") is False


def test_get_or_create_keeps_existing_headers():
    store = InMemoryGridStore()
    store.get_or_create_sheet(Book.EVENTS, "Master", ["ID", "Title"])
    store.get_or_create_sheet(Book.EVENTS, "Master", ["Other"])

    assert store.get_headers(Book.EVENTS, "Master") == ["ID", "Title"]


def test_rows_are_stored_as_strings_and_indices_shift_on_delete():
    store = InMemoryGridStore()
    assert store.append_row(Book.EVENTS, "Master", ["E1", 5, None]) == 0
    store.append_row(Book.EVENTS, "Master", ["E2", "x", "y"])

    store.delete_row(Book.EVENTS, "Master", 0)

    assert store.get_rows(Book.EVENTS, "Master") == [["E2", "x", "y"]]


def test_update_out_of_range_raises():
    store = InMemoryGridStore()
    store.get_or_create_sheet(Book.EVENTS, "Master")

    with pytest.raises(IndexError):
        store.update_row(Book.EVENTS, "Master", 3, ["x"])


def test_set_headers_widens_without_touching_rows():
    store = InMemoryGridStore()
    store.get_or_create_sheet(Book.EVENTS, "Master", ["ID", "Title"])
    store.append_row(Book.EVENTS, "Master", ["E1", "Sports Day"])

    store.set_headers(Book.EVENTS, "Master", ["ID", "Title", "Date"])

    assert store.get_headers(Book.EVENTS, "Master") == ["ID", "Title", "Date"]
    assert store.get_rows(Book.EVENTS, "Master") == [["E1", "Sports Day"]]


def test_list_sheets_is_scoped_to_book():
    store = InMemoryGridStore()
    store.get_or_create_sheet(Book.HOMEWORK, "5-A")
    store.get_or_create_sheet(Book.RESULTS, "5-A")

    assert list(store.list_sheets(Book.HOMEWORK)) == ["5-A"]


def test_class_sheet_name_defaults_and_sanitises():
    assert class_sheet_name("", "A") == "Unassigned"
    assert class_sheet_name("5", None) == "5-A"
    assert class_sheet_name("KG/1", "B") == "KG_1-B"
