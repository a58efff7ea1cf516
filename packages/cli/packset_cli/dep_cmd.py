"""Dep command - Parse and canonicalize a dependency line."""
from typing import Optional

import typer
from rich.table import Table

from packset_common.errors import PacksetError
from packset_schema import parse_dependency, parse_version

from .utils import console, error, handle_error, success


def dep(
    dependency: str = typer.Argument(..., help="Dependency line, e.g. 'name >=1.2.0 git:host/repo'"),
    satisfied_by: Optional[str] = typer.Option(
        None, "--check", "-c", help="Also test this version against the constraints"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """
    Parse a dependency line and print its canonical form.

    Examples:
        packset dep 'name <1.2.3-pre ~3.2.1-dev hg:hg.io'
        packset dep 'name >=1.0.0 <2.0.0' --check 1.5.0
    """
    try:
        parsed = parse_dependency(dependency)
        candidate = parse_version(satisfied_by) if satisfied_by is not None else None
    except PacksetError as e:
        handle_error(e, verbose)
        raise typer.Exit(1)

    console.print(parsed.to_text(), markup=False, highlight=False)

    if verbose:
        table = Table(title="Dependency", show_header=True, header_style="bold cyan")
        table.add_column("Operator", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")
        for constraint in parsed.constraints:
            table.add_row(constraint.operator.value, str(constraint.version))
        console.print(table)
        if parsed.url:
            console.print(f"Repository: {parsed.url}", markup=False)

    if candidate is not None:
        if parsed.satisfied_by(candidate):
            success(f"{candidate} satisfies {parsed.name}")
        else:
            error(f"{candidate} does not satisfy {parsed.name}")
            raise typer.Exit(1)
