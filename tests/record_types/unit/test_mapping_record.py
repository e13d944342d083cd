"""Mapping-backed data record tests."""

from __future__ import annotations

from rpc2_records.record_types.data_records import MappingRecord


def test_reads_flat_attributes() -> None:
    record = MappingRecord({"id": 3, "name": "Alice"})

    assert record.get("id") == 3
    assert record.get("missing") is None


def test_reads_nested_attributes_through_dotted_names() -> None:
    record = MappingRecord({"address": {"city": "Berlin"}, "a.b": "flat"})

    assert record.get("address.city") == "Berlin"
    assert record.get("address.zip") is None
    assert record.get("a.b") == "flat"


def test_attributes_are_copied_on_construction() -> None:
    attributes = {"id": 1}
    record = MappingRecord(attributes)
    attributes["id"] = 2

    assert record.get("id") == 1
