"""HSV to RGB conversion and hex encoding."""

import math

from ledcycle.models import HSV, RGB


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert an HSV color to RGB.

    Uses the alternative HSV formula
    (https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB_alternative):
    ``f(n) = v - v*s*max(min(k, 4-k, 1), 0)`` with ``k = (n + h/60) mod 6``
    and n = 5, 3, 1 for red, green and blue.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation (0.0-1.0)
        v: Value (0.0-1.0)

    Returns:
        RGB with channels in 0.0-1.0 for in-range input. Out-of-range input
        is not rejected.

    Example:
        >>> hsv_to_rgb(120, 1, 1).to_tuple()
        (0.0, 1.0, 0.0)
    """

    def f(n: int) -> float:
        k = (n + h / 60.0) % 6
        return v - v * s * max(min(k, 4 - k, 1), 0)

    return RGB(r=f(5), g=f(3), b=f(1))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert float RGB intensities to a 24 bit hex color string.

    Each channel is scaled by 255, floored, and masked to 8 bits.

    Example:
        >>> rgb_to_hex(1, 0, 0)
        '#FF0000'
    """
    r_bits = (math.floor(0xFF * r) & 0xFF) << 16
    g_bits = (math.floor(0xFF * g) & 0xFF) << 8
    b_bits = math.floor(0xFF * b) & 0xFF
    return f"#{r_bits | g_bits | b_bits:06X}"


def hsv_to_hex(hsv: HSV) -> str:
    """Convert an HSV model straight to a hex color string."""
    rgb = hsv_to_rgb(hsv.h, hsv.s, hsv.v)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)
