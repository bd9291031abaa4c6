"""
Custom exception hierarchy for ledcycle.

## Exception Hierarchy

```
LedCycleError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── HardwareError
    └── GpioUnavailableError
```

All custom exceptions inherit from `LedCycleError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Nothing in the color cycling core raises these: malformed messages from
the dashboard are dropped there and the LED keeps its last color. They
cover configuration loading and output hardware.
"""

from .base import LedCycleError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .hardware import GpioUnavailableError, HardwareError

__all__ = [
    # Base
    "LedCycleError",
    # Config
    "ConfigFileInvalidError",
    "ConfigurationError",
    "ConfigValidationError",
    # Hardware
    "GpioUnavailableError",
    "HardwareError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
