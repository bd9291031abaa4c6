"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from ledcycle import __version__

from .commands import color, config, run

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".ledcycle" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Get the log file the application writes to."""
    if log_file:
        return log_file
    if debug:
        # Debug mode: log to current directory
        return Path.cwd() / "ledcycle-debug.log"
    return DEFAULT_LOG_DIR / "ledcycle.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> Path:
    """
    Configure logging for the application.

    The dashboard owns stdout, so logs only go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug level and log to ./ledcycle-debug.log
        log_file: Custom log file path (optional)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def report_error(error: Exception, log_path: Optional[Path]) -> None:
    """Print an error without a traceback and exit with status 1."""
    from ledcycle.exceptions import format_error_for_display

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
    click.echo("For logging options, run: ledcycle --help", err=True)

    sys.exit(1)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="ledcycle")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./ledcycle-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path]):
    """
    LED Color Cycle - cycle an RGB LED through a list of HSV colors.

    The dashboard edits the color list while a background worker fades the
    LED from color to color.

    \b
    Examples:
      # Start the dashboard (same as 'ledcycle run')
      ledcycle

      # Run without hardware
      ledcycle run --backend null

      # Cycle red and blue without a dashboard
      ledcycle run --headless --color 0,1,1 --color 240,1,1

      # Show the RGB values of a color
      ledcycle color 120 1 0.5
    """
    ctx.ensure_object(dict)
    ctx.obj["log_path"] = None

    if ctx.invoked_subcommand in (None, "run"):
        ctx.obj["log_path"] = setup_logging(verbose, debug, log_file)

    # If a subcommand was invoked, let it run
    if ctx.invoked_subcommand is not None:
        return

    ctx.invoke(run)


# Register commands
cli.add_command(run)
cli.add_command(config)
cli.add_command(color)

if __name__ == "__main__":
    cli()
