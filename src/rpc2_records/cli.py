"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
import yaml

from rpc2_records.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_registry,
    load_record_types,
    write_placeholder_configuration,
)
from rpc2_records.operation_dispatch import UnknownVerbError, plan_operation
from rpc2_records.record_types import CrudVerb, MappingRecord, RecordTypeError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="rpc2-records")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Emit diagnostic logging at this level on stderr",
)
def cli(log_level: str | None) -> None:
    """Declarative RPC record configuration utility."""
    if log_level is None:
        return
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML record type configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML record type configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON record type configuration file",
)
@click.option(
    "--record-type",
    "record_type",
    required=True,
    help="Name of the record type to resolve",
)
def resolve(config_path: str, record_type: str) -> None:
    """Print the record type's options after inheritance as YAML."""
    try:
        registry = build_registry(load_record_types(config_path))
        resolved = registry.resolve(record_type)
    except (ConfigurationError, RecordTypeError) as exc:
        raise CliError(str(exc)) from exc
    document = {
        "record_type": resolved.name,
        "ancestors": list(resolved.ancestors),
        "url": resolved.url,
        "rpc_options": _displayable(resolved.options_as_dict()),
    }
    click.echo(yaml.safe_dump(document, sort_keys=False).rstrip())


@cli.command(name="build-params")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON record type configuration file",
)
@click.option(
    "--record-type",
    "record_type",
    required=True,
    help="Name of the record type owning the operation",
)
@click.option(
    "--verb",
    required=True,
    type=click.Choice([verb.value for verb in CrudVerb]),
    help="CRUD verb to build the RPC call for",
)
@click.option(
    "--attributes",
    "attributes_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a JSON object holding the record attributes",
)
def build_params_command(
    config_path: str, record_type: str, verb: str, attributes_path: str | None
) -> None:
    """Print the RPC method and params a verb would send, without calling any transport."""
    try:
        registry = build_registry(load_record_types(config_path))
        record = MappingRecord(_load_attributes(attributes_path))
        planned = plan_operation(verb, registry.resolve(record_type), record)
    except (ConfigurationError, RecordTypeError, UnknownVerbError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(_displayable(planned.as_dict()), indent=2, default=str))


def _load_attributes(attributes_path: str | None) -> Mapping[str, Any]:
    if attributes_path is None:
        return {}
    attributes = json.loads(Path(attributes_path).read_text(encoding="utf-8"))
    if not isinstance(attributes, Mapping):
        raise ValueError("Record attributes must be a JSON object.")
    return attributes


def _displayable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _displayable(child) for key, child in value.items()}
    if isinstance(value, (list, tuple)):
        return [_displayable(child) for child in value]
    if callable(value):
        name = getattr(value, "__qualname__", type(value).__name__)
        return f"<computed {getattr(value, '__module__', '?')}.{name}>"
    return value


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
