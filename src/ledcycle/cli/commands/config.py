"""Config command - inspect and reset the application configuration."""

from pathlib import Path
from typing import Optional

import click

from ledcycle.exceptions import LedCycleError
from ledcycle.models import DEFAULT_CONFIG_PATH, AppConfig

config_path_option = click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)


@click.group()
def config():
    """Configure LED Color Cycle settings."""
    pass


@config.command()
@config_path_option
def show(config_path: Optional[Path]):
    """Display the configuration (defaults if no file exists)."""
    try:
        app_config = AppConfig.load_or_default(config_path)
    except LedCycleError as e:
        click.echo(f"Error: {e.user_message}", err=True)
        if e.recovery_hint:
            click.echo(e.recovery_hint, err=True)
        raise click.Abort()

    click.echo(app_config.model_dump_json(indent=2))


@config.command()
@config_path_option
def path(config_path: Optional[Path]):
    """Print the config file location."""
    click.echo(str(config_path or DEFAULT_CONFIG_PATH))


@config.command()
@config_path_option
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
def reset(config_path: Optional[Path], yes: bool):
    """Reset the configuration to defaults."""
    target = config_path or DEFAULT_CONFIG_PATH

    if not yes:
        click.confirm(f"Reset {target} to defaults?", abort=True)

    AppConfig().save(target)
    click.echo(f"Configuration reset: {target}")
