"""Weather provider clients.

Available clients:
- openweather: OpenWeatherMap current-weather client
"""

from . import openweather

__all__ = ["openweather"]
