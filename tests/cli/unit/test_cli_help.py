"""CLI smoke tests."""

from click.testing import CliRunner
from content_type_builder.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "build-payload" in result.output
    assert "changed-components" in result.output
    assert "list-content-types" in result.output
