"""Run command - start the color cycle worker with the dashboard or headless."""

import logging
import time
from pathlib import Path
from typing import Optional

import click

from ledcycle.models import HSV, AppConfig, OutputBackend

logger = logging.getLogger(__name__)


class HsvParamType(click.ParamType):
    """Click parameter for an 'H,S,V' color, e.g. '240,1,0.5'."""

    name = "H,S,V"

    def convert(self, value, param, ctx) -> HSV:
        if isinstance(value, HSV):
            return value

        parts = str(value).split(",")
        if len(parts) != 3:
            self.fail(f"{value!r} is not of the form H,S,V", param, ctx)

        try:
            h, s, v = (float(part) for part in parts)
        except ValueError:
            self.fail(f"{value!r} contains a non-numeric channel", param, ctx)

        if not (0.0 <= h <= 360.0 and 0.0 <= s <= 1.0 and 0.0 <= v <= 1.0):
            self.fail(f"{value!r} is out of range (H 0-360, S and V 0-1)", param, ctx)

        return HSV(h=h, s=s, v=v)


HSV_COLOR = HsvParamType()


def run_headless(
    app_config: AppConfig,
    colors: list[HSV],
    duration: Optional[float] = None,
) -> None:
    """
    Cycle colors without a dashboard until interrupted or duration elapses.

    Args:
        app_config: Configuration (backend, pins, timing)
        colors: Colors to cycle through (one default color if empty)
        duration: Seconds to run; forever if None
    """
    from ledcycle.core import ColorLink, ColorSequencer, CycleWorker
    from ledcycle.dashboard import DashboardController
    from ledcycle.hardware import create_rgb_output

    link = ColorLink()
    sequencer = ColorSequencer()
    controller = DashboardController(sequencer, link)
    controller.load_colors(colors)

    worker = CycleWorker.from_config(link, app_config, create_rgb_output(app_config))
    interval = app_config.update_interval_ms / 1000.0
    started = time.monotonic()

    with worker:
        click.echo(f"Cycling {len(sequencer)} color(s), press Ctrl+C to stop", err=True)
        while duration is None or time.monotonic() - started < duration:
            controller.process_engine_messages()
            time.sleep(interval)


def run_dashboard(app_config: AppConfig, colors: list[HSV]) -> None:
    """Start the worker and run the dashboard until it exits."""
    from ledcycle.core import ColorLink, CycleWorker
    from ledcycle.dashboard import ColorDashboard
    from ledcycle.hardware import create_rgb_output

    link = ColorLink()
    worker = CycleWorker.from_config(link, app_config, create_rgb_output(app_config))
    dashboard = ColorDashboard(
        link,
        poll_interval_ms=app_config.update_interval_ms,
        initial_colors=colors,
    )

    with worker:
        dashboard.run()


@click.command()
@click.pass_context
@click.option(
    '--headless',
    is_flag=True,
    help='Run without the dashboard'
)
@click.option(
    '--backend',
    '-b',
    type=click.Choice([backend.value for backend in OutputBackend], case_sensitive=False),
    default=None,
    help='LED output backend (overrides the config file)'
)
@click.option(
    '--color',
    '-c',
    'colors',
    type=HSV_COLOR,
    multiple=True,
    help='Color to cycle through as H,S,V (repeatable)'
)
@click.option(
    '--duration',
    type=click.FloatRange(min=0.0),
    default=None,
    help='Stop a headless run after this many seconds'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.ledcycle/config.json)'
)
def run(
    ctx,
    headless: bool,
    backend: Optional[str],
    colors: tuple[HSV, ...],
    duration: Optional[float],
    config_path: Optional[Path],
):
    """
    Start cycling the LED.

    \b
    Examples:
      # Dashboard with the configured GPIO pins
      ledcycle run

      # Dashboard without hardware
      ledcycle run --backend null

      # Headless, red to green to blue
      ledcycle run --headless -c 0,1,1 -c 120,1,1 -c 240,1,1
    """
    from .. import main

    log_path = (ctx.obj or {}).get("log_path")
    logger.info("Starting LED Color Cycle")

    try:
        app_config = AppConfig.load_or_default(config_path)
        if backend:
            app_config = app_config.model_copy(update={"output_backend": OutputBackend(backend.lower())})
        logger.info(f"Output backend: {app_config.output_backend.value}")

        if headless:
            run_headless(app_config, list(colors), duration)
        else:
            run_dashboard(app_config, list(colors))

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")
        main.report_error(e, log_path)
