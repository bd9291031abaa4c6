"""Color command - show how an HSV color is driven on the LED."""

import click

from ledcycle.colors import hsv_to_rgb, rgb_to_hex
from ledcycle.hardware import duty_cycle


@click.command()
@click.argument('h', type=click.FloatRange(0.0, 360.0))
@click.argument('s', type=click.FloatRange(0.0, 1.0))
@click.argument('v', type=click.FloatRange(0.0, 1.0))
def color(h: float, s: float, v: float):
    """
    Print the RGB intensities, PWM duty cycles and hex code of an HSV color.

    \b
    Examples:
      ledcycle color 0 1 1        # pure red
      ledcycle color 240 0.5 1    # light blue
    """
    rgb = hsv_to_rgb(h, s, v)

    click.echo(f"HSV: h={h:g} s={s:g} v={v:g}")
    click.echo(f"RGB: r={rgb.r:.3f} g={rgb.g:.3f} b={rgb.b:.3f}")
    click.echo(
        "PWM: " + " ".join(
            f"{name}={duty_cycle(value):.1f}%" for name, value in zip("rgb", rgb.to_tuple())
        )
    )
    click.echo(f"Hex: {rgb_to_hex(rgb.r, rgb.g, rgb.b)}")
