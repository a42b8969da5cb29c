"""CLI interface for pubmanifest using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from pubmanifest import __description__, __version__
from pubmanifest.config import PubManifestConfig, ReportFormat, load_config
from pubmanifest.validation import ValidationReport, default_rules, validate_manifest

MANIFEST_FILENAME = "package.json"

# Exit codes: 0 valid, 1 invalid, 2 usage or input problem
EXIT_INVALID = 1
EXIT_USAGE = 2

app = typer.Typer(
    name="pubmanifest",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"pubmanifest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """pubmanifest - Pre-publish checks for package manifests."""


def _configure_logging(config: PubManifestConfig, verbose: bool) -> None:
    level = "DEBUG" if verbose else config.logging.level.to_logging_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_manifest(path: Path) -> dict[str, Any]:
    """Read a package.json file, or the one inside a directory.

    Raises:
        FileNotFoundError: If no manifest file exists at path
        ValueError: If the file is not a JSON object
    """
    manifest_path = path / MANIFEST_FILENAME if path.is_dir() else path
    if not manifest_path.is_file():
        raise FileNotFoundError(f"Manifest not found: {manifest_path}")

    logger.debug(f"Loading manifest from {manifest_path}")
    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = jsonlib.load(f)
    except jsonlib.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Manifest must contain a JSON object: {manifest_path}")
    return data


def _print_report(report: ValidationReport) -> None:
    if report.valid:
        console.print(
            f"[green]Manifest is valid[/green] ({len(report.warnings)} warnings)"
        )
    else:
        console.print(
            f"[red]Manifest is invalid[/red] "
            f"({len(report.errors)} errors, {len(report.warnings)} warnings)"
        )

    if not report.errors and not report.warnings:
        console.print("\n[green]No issues found![/green]")
        return

    table = Table()
    table.add_column("Severity", style="white")
    table.add_column("Message", style="white")
    for message in report.errors:
        table.add_row("[red]ERROR[/red]", message)
    for message in report.warnings:
        table.add_row("[yellow]WARN[/yellow]", message)
    console.print(table)


@app.command()
def validate(
    path: Annotated[
        Path,
        typer.Argument(help="Path to package.json or a directory containing one")
    ] = Path("."),
    format: Annotated[
        Optional[ReportFormat],
        typer.Option("--format", "-f", help="Output format: table, json (default: from config, else table)")
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat warnings as failures for the exit code")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a package manifest before publishing."""
    try:
        settings = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_USAGE)

    _configure_logging(settings, verbose)

    try:
        record = _load_manifest(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_USAGE)
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to read manifest: {e}")
        raise typer.Exit(EXIT_USAGE)

    report = validate_manifest(record)

    output_format = format or settings.output.format
    if output_format is ReportFormat.JSON:
        typer.echo(jsonlib.dumps(report.to_dict(), indent=2))
    else:
        _print_report(report)

    fail_on_warnings = strict or settings.validation.fail_on_warnings
    if not report.valid or (fail_on_warnings and report.warnings):
        raise typer.Exit(EXIT_INVALID)


@app.command()
def rules() -> None:
    """List the rules applied to every manifest, in evaluation order."""
    table = Table()
    table.add_column("Rule", style="cyan")
    table.add_column("Severity", style="white")
    table.add_column("Fields", style="white")
    table.add_column("Shapes", style="dim")

    for rule in default_rules():
        info = rule.describe()
        shapes = ", ".join(info.get("accepts", []))
        sub_keys = info.get("subKeys", [])
        if sub_keys:
            shapes += " {" + ", ".join(
                f"{sub['key']}: {sub['severity']}" for sub in sub_keys
            ) + "}"
        table.add_row(info["name"], info["severity"], ", ".join(info["fields"]), shapes)

    console.print(table)


if __name__ == "__main__":
    app()
