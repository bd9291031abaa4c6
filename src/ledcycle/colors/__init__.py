"""Color math for the LED cycler.

Pure functions shared by the dashboard and the cycling worker.

## HSV and RGB

Colors are edited and interpolated as HSV (hue in degrees 0-360,
saturation and value in 0.0-1.0) and converted to float RGB (0.0-1.0 per
channel) only at the edges: the PWM output and hex strings for widgets.

```
 dashboard sliders ──► HSV ──► interpolate_hsv ──► hsv_to_rgb ──► PWM duty cycles
                        │
                        └──► hsv_to_hex ──► widget decoration colors
```

## Hue Interpolation

`interpolate_hue` always takes the shorter arc around the hue circle, so
350° → 10° passes through 0°, never backwards through 180°.

Example:
    ```python
    from ledcycle.colors import hsv_to_rgb, interpolate_hue, rgb_to_hex

    interpolate_hue(350, 10, 0.5)   # 0.0
    rgb = hsv_to_rgb(0, 1, 1)       # RGB(r=1.0, g=0.0, b=0.0)
    rgb_to_hex(rgb.r, rgb.g, rgb.b) # '#FF0000'
    ```
"""

from .conversion import hsv_to_hex, hsv_to_rgb, rgb_to_hex
from .interpolation import interpolate_hsv, interpolate_hue, lerp

__all__ = [
    "hsv_to_hex",
    "hsv_to_rgb",
    "interpolate_hsv",
    "interpolate_hue",
    "lerp",
    "rgb_to_hex",
]
