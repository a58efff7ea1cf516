"""Check command - Test a version against constraints."""
from typing import List

import typer

from packset_common.errors import PacksetError
from packset_schema import parse_constraint, parse_version

from .utils import console, error, handle_error, success


def check(
    version: str = typer.Argument(..., help="Candidate version, e.g. 1.2.3-rc.1"),
    constraints: List[str] = typer.Argument(..., help="Constraints, e.g. '>=1.2.0' '<2.0.0'"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only set the exit code"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show each constraint"),
):
    """
    Check that a version satisfies every constraint.

    Exits with 0 when all constraints hold and 1 otherwise.

    Examples:
        packset check 1.4.0 '>=1.2.0' '<2.0.0'
        packset check 2.0.0 '~1.0.0'
    """
    try:
        candidate = parse_version(version)
        parsed = [parse_constraint(c) for c in constraints]
    except PacksetError as e:
        handle_error(e, verbose)
        raise typer.Exit(1)

    failed = []
    for constraint in parsed:
        ok = constraint.is_satisfied_by(candidate)
        if verbose and not quiet:
            mark = "[green]yes[/green]" if ok else "[red]no[/red]"
            console.print(f"  {candidate} {constraint}: {mark}")
        if not ok:
            failed.append(str(constraint))

    if failed:
        if not quiet:
            error(f"{candidate} does not satisfy {' '.join(failed)}")
        raise typer.Exit(1)

    if not quiet:
        success(f"{candidate} satisfies {' '.join(str(c) for c in parsed)}")
