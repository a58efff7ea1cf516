"""Shared console helpers for CLI commands."""
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from packset_common.errors import PacksetError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✅ {escape(message)}[/bold green]")


def error(message: str) -> None:
    console.print(f"[bold red]❌ {escape(message)}[/bold red]")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def info(message: str) -> None:
    console.print(f"[cyan]{escape(message)}[/cyan]")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print an error; packset errors show their message, others their type."""
    if isinstance(e, PacksetError):
        error(e.message)
    elif isinstance(e, PydanticValidationError):
        fields = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        error(f"Invalid settings: {fields}")
    else:
        error(f"Unexpected error: {type(e).__name__}: {e}")
    if verbose:
        console.print_exception()
