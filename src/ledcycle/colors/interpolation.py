"""Interpolation between HSV colors."""

from ledcycle.models import HSV


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return a + (b - a) * t


def _clamp_unit(t: float) -> float:
    return min(max(t, 0.0), 1.0)


def interpolate_hue(from_h: float, to_h: float, t: float) -> float:
    """
    Interpolate a hue along the shorter arc of the hue circle.

    Args:
        from_h: Start hue in degrees
        to_h: End hue in degrees
        t: Interpolation factor, clamped to 0.0-1.0

    Returns:
        Hue in degrees, wrapped into [0, 360)

    Example:
        >>> interpolate_hue(350, 10, 0.5)
        0.0
    """
    t = _clamp_unit(t)

    diff = to_h - from_h
    if diff > 180:
        diff -= 360
    elif diff <= -180:
        diff += 360

    return (from_h + diff * t) % 360.0


def interpolate_hsv(from_color: HSV, to_color: HSV, t: float) -> HSV:
    """
    Interpolate between two HSV colors.

    The hue takes the shorter arc, saturation and value are interpolated
    linearly. ``t`` is clamped to 0.0-1.0: 0 gives ``from_color``, 1 gives
    ``to_color``.
    """
    t = _clamp_unit(t)
    # Skips validation: a float lerp between valid channels may land an ulp outside 0-1
    return HSV.model_construct(
        h=interpolate_hue(from_color.h, to_color.h, t),
        s=lerp(from_color.s, to_color.s, t),
        v=lerp(from_color.v, to_color.v, t),
    )
