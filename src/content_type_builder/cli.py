"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from content_type_builder.change_detection import detect_changes
from content_type_builder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from content_type_builder.navigation import sort_content_types
from content_type_builder.save_request import SaveRequest, SaveRequestError, build_save_body
from content_type_builder.schema_model import WorkingSetError, load_working_set


class CliError(Exception):
    """Custom CLI error."""


_STATE_OPTION = click.option(
    "--state",
    "state_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON working-set document",
)
_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to the YAML/JSON builder configuration",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="content-type-builder")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Diff and format content-type builder schemas for saving."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="changed-components")
@_STATE_OPTION
def changed_components(state_path: str) -> None:
    """List the uids of components created or modified since the baseline."""
    try:
        working_set = load_working_set(state_path)
    except WorkingSetError as exc:
        raise CliError(str(exc)) from exc
    for uid in detect_changes(working_set.components, working_set.initial_components):
        click.echo(uid)


@cli.command(name="build-payload")
@_STATE_OPTION
@click.option("--uid", required=True, help="Uid of the content type or component to save")
@click.option(
    "--component",
    "is_component",
    is_flag=True,
    default=False,
    help="Save a component instead of a content type.",
)
@_CONFIG_OPTION
def build_payload(state_path: str, uid: str, is_component: bool, config_path: str | None) -> None:
    """Print the JSON body for saving one content type or component."""
    try:
        configuration = load_configuration(config_path)
        working_set = load_working_set(state_path)
        request = SaveRequest.from_working_set(working_set, uid, is_component=is_component)
    except (ConfigurationError, WorkingSetError, SaveRequestError) as exc:
        raise CliError(str(exc)) from exc
    body = build_save_body(request, configuration.field_registry())
    click.echo(_to_json(body))


@cli.command(name="list-content-types")
@_STATE_OPTION
@_CONFIG_OPTION
def list_content_types(state_path: str, config_path: str | None) -> None:
    """Print the content types in navigation order as JSON."""
    try:
        configuration = load_configuration(config_path)
        working_set = load_working_set(state_path)
    except (ConfigurationError, WorkingSetError) as exc:
        raise CliError(str(exc)) from exc
    links = sort_content_types(working_set.content_types, plugin_id=configuration.plugin_id)
    click.echo(_to_json([link.to_dict() for link in links]))


def _to_json(value: object) -> str:
    # YAML state files can hold dates and timestamps; they are sent as ISO strings.
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


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
