"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "record_types.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Record type configuration for rpc2-records.
# Every record type extends the built-in base record type unless it names another one.
# Options left out are inherited from the nearest ancestor that declares them.

record_types:
  contact:
    # extends: "<OPTIONAL>"
    url: "<REQUIRED>"
    rpc_options:
      # Headers are inherited as a whole, never merged key by key.
      headers:
        X-Api-Key: "<OPTIONAL>"
      methods:
        # Each verb entry is inherited as a whole as well.
        create:
          method: "contacts.create"
          # Strings starting with "attributes." are replaced by the record's value
          # when it is set; every other value is sent as written.
          params:
            name: "attributes.name"
        read:
          method: "contacts.read"
          params:
            id: "attributes.id"
        update:
          method: "contacts.update"
          params:
            id: "attributes.id"
            name: "attributes.name"
        delete:
          method: "contacts.delete"
          # A computed-value function receives the record and returns the params.
          # params_factory: "<OPTIONAL package.module:callable>"
          params:
            id: "attributes.id"

# Option paths inherited as a whole. Defaults shown.
# atomic_paths:
#   - rpc_options.headers
#   - methods.create
#   - methods.read
#   - methods.update
#   - methods.delete
"""


def build_placeholder_configuration() -> str:
    """Build a YAML record type configuration with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder record type configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
