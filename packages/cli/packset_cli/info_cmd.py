"""Info commands - Version and workspace paths."""
import sys
from typing import Optional

import typer
from rich.table import Table

from packset_common import PACKSET_VERSION
from packset_common.errors import PacksetError
from packset_sdk import Paths

from .utils import console, handle_error


def version():
    """
    Show packset version information.

    Examples:
        packset version
    """
    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    table = Table(title="packset Version Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")
    table.add_row("packset", PACKSET_VERSION)
    table.add_row("Python", python_version)
    console.print(table)


def paths(
    packset: Optional[str] = typer.Option(None, "--packset", "-p", help="Packset name"),
):
    """
    Show the workspace paths packset uses.

    Reads the roots from PACKSET_PATH.

    Examples:
        packset paths
        packset paths --packset testing
    """
    try:
        p = Paths.from_env(packset)
    except PacksetError as e:
        handle_error(e)
        raise typer.Exit(1)

    table = Table(title="packset Paths", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", overflow="fold")
    table.add_row("Packset", p.packset)
    table.add_row("Roots", "\n".join(str(r) for r in p.roots))
    table.add_row("Home", str(p.home_path))
    table.add_row("Config", str(p.config_path))
    table.add_row("Packset source", str(p.packset_path))
    console.print(table)
