"""packset CLI - Main entry point."""
from typing import Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from packset_common import configure_logging, get_settings

from . import check_cmd, dep_cmd, info_cmd, validate_cmd
from .utils import handle_error

app = typer.Typer(
    name="packset",
    help="packset CLI - Semantic versions, dependency constraints and pack files",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="debug, info, warn or error (default: PACKSET_LOG_LEVEL)"
    ),
):
    """Configure logging before any command runs."""
    try:
        settings = get_settings()
    except PydanticValidationError as e:
        handle_error(e)
        raise typer.Exit(1)
    configure_logging(log_level or settings.log_level)


# Register all commands
app.command()(check_cmd.check)
app.command()(dep_cmd.dep)
app.command()(validate_cmd.validate)
app.command()(info_cmd.version)
app.command()(info_cmd.paths)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
