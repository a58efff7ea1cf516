"""Validate command - Validate a pack file."""
from pathlib import Path

import typer
from rich.table import Table

from packset_common.errors import PacksetError
from packset_sdk import load_pack

from .utils import console, error, handle_error, success


def validate(
    path: str = typer.Argument("pack.yaml", help="Path to pack file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the parsed contents"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only set the exit code"),
):
    """
    Validate a pack file.

    Checks YAML syntax, required fields, the version literal and every
    dependency line.

    Examples:
        packset validate
        packset validate path/to/pack.yaml --verbose
    """
    if not Path(path).exists():
        if not quiet:
            error(f"Pack file not found: {path}")
        raise typer.Exit(1)

    try:
        spec = load_pack(path)
    except (PacksetError, OSError) as e:
        if not quiet:
            handle_error(e, verbose)
        raise typer.Exit(1)

    if quiet:
        return

    success(f"Pack file is valid: {spec.name} {spec.version}")

    if verbose:
        table = Table(title="Dependencies", show_header=True, header_style="bold cyan")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Constraints", style="green")
        table.add_column("Repository")
        for dependency in spec.dependencies or []:
            table.add_row(
                dependency.name,
                " ".join(str(c) for c in dependency.constraints),
                dependency.url,
            )
        console.print(table)
