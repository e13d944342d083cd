"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rpc2_records.option_inheritance import AtomicOptionPaths
from rpc2_records.record_types.record_models import RecordSchema


@dataclass(frozen=True)
class RecordTypesConfiguration:
    """Record type declarations loaded from one configuration file."""

    path: Path
    record_types: tuple[RecordSchema, ...]
    atomic_paths: AtomicOptionPaths

    def names(self) -> tuple[str, ...]:
        return tuple(schema.name for schema in self.record_types)
