"""Main CLI entry point."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

from vnscript import __version__
from vnscript.cli.commands import choices_command, parse_command, run_command
from vnscript.cli.formatters.json_formatter import JsonFormatter
from vnscript.config import get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="vnscript",
    help="Parse and compile visual-novel scenario scripts",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="choices")(choices_command)
app.command(name="run")(run_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show vnscript version."""
    version_info = {"name": "vnscript", "version": __version__}
    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"vnscript v{__version__}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="VNSCRIPT_DEBUG"),
    ] = False,
) -> None:
    """Configure global options."""
    if not (debug or verbose):
        return

    os.environ["VNSCRIPT_LOG_LEVEL"] = "DEBUG" if debug else "INFO"
    if debug:
        os.environ["VNSCRIPT_DEBUG"] = "true"

    from vnscript.config import clear_settings_cache, configure_logging, get_settings

    clear_settings_cache()
    configure_logging(get_settings())
    logger.debug("Logging reconfigured", debug=debug, verbose=verbose)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
