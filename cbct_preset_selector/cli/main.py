#!/usr/bin/env python3
"""
Main CLI application entry point.

Loads the preset table (from the given path or the per-user data folder),
then runs the interactive machine -> pathology selection until the user is
done. Every stage reports failures as a Result; this module is the single
place where a failure is logged and turned into exit code 1.
"""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from cbct_preset_selector import APP_NAME, __version__
from cbct_preset_selector.cli.config import AppConfig, load_config_with_precedence
from cbct_preset_selector.cli.context import CommandContext, create_context
from cbct_preset_selector.cli.logging_config import get_logger, setup_logging
from cbct_preset_selector.cli.platform_support import ensure_data_dir, pause
from cbct_preset_selector.cli.resolver import run_session
from cbct_preset_selector.core.errors import AppError, Result
from cbct_preset_selector.core.loader import load_table


logger = get_logger(__name__)

BANNER = "CBCT preset selector\n--------------------"

CSV_FILE_HELP = (
    "CSV table with the CBCT presets per pathology and machine. "
    "When omitted, data.csv is read from the per-user local data folder "
    "(Windows: %LOCALAPPDATA%\\cbct_preset_selector, "
    "Linux: ~/.local/share/cbct_preset_selector, "
    "macOS: ~/Library/Application Support/cbct_preset_selector)."
)


app = typer.Typer(
    name=APP_NAME,
    help="Interactive selector of CBCT presets by machine and pathology",
    add_completion=False
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


def wait_exit(context: CommandContext, code: int) -> NoReturn:
    """Leave the process with ``code``, pausing first when configured to."""
    if code != 0:
        context.print(f"Exit code: {code}.", markup=False)
    if context.pause_on_exit:
        pause(context.console, context.terminal.stream)
    raise typer.Exit(code)


def exit_with_error(
    context: CommandContext,
    error: AppError,
    help_ctx: Optional[typer.Context] = None,
) -> NoReturn:
    """Log ``error``, optionally show the long help, and exit with code 1."""
    logger.error(str(error))
    if help_ctx is not None:
        context.print()
        typer.echo(help_ctx.get_help())
    wait_exit(context, 1)


def exit_on_error(context: CommandContext, result: Result) -> None:
    if not result.is_ok:
        exit_with_error(context, result.error)


def resolve_data_file(
    context: CommandContext,
    help_ctx: typer.Context,
    csv_file: Optional[Path],
) -> Path:
    """
    Pick the preset table to load.

    An explicit path is used as given. Otherwise the table is looked up in the
    configured data directory, which is created when missing.
    """
    if csv_file is not None:
        return csv_file

    data_dir = context.config.resolved_data_dir
    data_file = context.config.default_data_file

    created = ensure_data_dir(data_dir)
    if not created.is_ok:
        exit_with_error(context, created.error, help_ctx)
    if created.value:
        logger.info(f"Created missing directory: {data_dir}")

    if not data_file.is_file():
        exit_with_error(
            context,
            AppError.io(
                f"Missing CSV file {data_file}. Copy the {context.config.data_file_name} "
                f"file into this directory: {data_dir}"
            ),
            help_ctx,
        )

    return data_file


@app.command()
def select_preset(
    ctx: typer.Context,
    csv_file: Optional[Path] = typer.Argument(
        None,
        help=CSV_FILE_HELP,
        show_default=False
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging output"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Use specific config file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
):
    """
    Select a CBCT preset by machine and pathology.

    Shows numbered menus of the machines and pathologies found in the CSV
    table and prints the matching preset.
    """
    console = Console(highlight=False)

    try:
        config = load_config_with_precedence(
            config_file=config_file,
            verbose=verbose or None,
        )
    except (OSError, ValueError) as e:
        setup_logging(verbose=verbose)
        exit_with_error(
            create_context(config=AppConfig(), console=console),
            AppError.io(f"Invalid configuration: {e}"),
        )

    context = create_context(config=config, console=console)
    try:
        setup_logging(verbose=config.verbose, log_dir=config.log_dir)
    except OSError as e:
        setup_logging(verbose=config.verbose)
        exit_with_error(context, AppError.io(f"Unable to open log directory {config.log_dir}: {e}"))

    context.print(BANNER, markup=False)

    data_file = resolve_data_file(context, ctx, csv_file)
    logger.debug(f"Using preset table {data_file}")

    loaded = load_table(data_file, delimiter=config.delimiter, encoding=config.encoding)
    exit_on_error(context, loaded)

    session = run_session(context.terminal, loaded.value)
    exit_on_error(context, session)
    logger.debug(f"Session finished after {session.value} presets")


def main():
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
