from weather_display.utils.logging_config import (
    ColoredFormatter,
    configure_logging,
    supports_ansi,
)

__all__ = [
    "ColoredFormatter",
    "configure_logging",
    "supports_ansi",
]
