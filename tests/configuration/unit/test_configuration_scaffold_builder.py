"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from rpc2_records.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from rpc2_records.configuration.loader import build_registry, load_record_types
from rpc2_records.record_types import CrudVerb


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Record type configuration" in scaffold
    assert "record_types:" in scaffold
    assert "rpc_options:" in scaffold
    assert "headers:" in scaffold
    assert "methods:" in scaffold
    for verb in ("create:", "read:", "update:", "delete:"):
        assert verb in scaffold
    assert "params_factory" in scaffold
    assert "atomic_paths" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_written_scaffold_loads_and_resolves(tmp_path: Path) -> None:
    output_path = tmp_path / "record_types.yaml"

    written_path = write_placeholder_configuration(output_path)
    registry = build_registry(load_record_types(written_path))
    contact = registry.resolve("contact")

    assert written_path == output_path.resolve()
    assert contact.rpc_options.method_for(CrudVerb.DELETE).method == "contacts.delete"


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "record_types.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
