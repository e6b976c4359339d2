#!/usr/bin/env python3
"""Command line weather display."""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from weather_display.app.controller import WeatherController
from weather_display.app.locators import FixedLocator, Locator, UnavailableLocator
from weather_display.app.state import WeatherState
from weather_display.clients.openweather.client import OpenWeatherClient
from weather_display.clients.openweather.constants import API_KEY_SIGNUP_URL, SUPPORTED_UNITS
from weather_display.config.settings import get_settings
from weather_display.utils.logging_config import configure_logging
from weather_display.view_model import QUICK_CITIES, DisplayModel

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_USAGE = 2

CREDENTIAL_NOTICE = (
    "Add your OpenWeatherMap API key (OPENWEATHER_API_KEY) to fetch real-time data. "
    f"Get one free at {API_KEY_SIGNUP_URL}"
)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the weather CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-display",
        description="Show current weather for a city or a position.",
    )
    parser.add_argument(
        "city",
        nargs="?",
        help="City to look up (default: position from --lat/--lon, else the default city)",
    )
    parser.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("--lon", type=float, help="Longitude in decimal degrees")
    parser.add_argument("--api-key", help="Override OPENWEATHER_API_KEY")
    parser.add_argument(
        "--units",
        choices=SUPPORTED_UNITS,
        help="Units preference (default: from settings, metric)",
    )
    parser.add_argument("--log-level", help="Logging level (default: from settings, INFO)")
    return parser


def render_view(view: DisplayModel) -> List[str]:
    lines = [
        view.location,
        f"  {view.temperature}  {view.description}  [{view.style.icon}]",
        f"  {view.feels_like}",
        "",
    ]
    width = max(len(item.label) for item in view.details)
    lines.extend(f"  {item.label:<{width}}  {item.value}" for item in view.details)
    lines.append("")
    lines.append(f"  Min Temp {view.temp_min}   Max Temp {view.temp_max}")
    return lines


def render_state(state: WeatherState) -> str:
    """Render the current state as plain text."""
    lines: List[str] = []
    if state.credential_missing:
        lines.append(f"! {CREDENTIAL_NOTICE}")
    if state.error:
        lines.append(f"Error: {state.error}")
    if state.loading:
        lines.append("Loading...")
    elif state.has_weather and state.view is not None:
        if lines:
            lines.append("")
        lines.extend(render_view(state.view))
        lines.append("")
        lines.append("Quick cities: " + ", ".join(QUICK_CITIES))
    return "\n".join(lines)


def _select_locator(args: argparse.Namespace) -> Locator:
    if args.lat is not None:
        return FixedLocator(args.lat, args.lon)
    return UnavailableLocator()


def run_cli(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
        out: Stream for the rendered weather (default: stdout).

    Returns:
        Process exit status.
    """
    out = out if out is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    city = (args.city or "").strip()
    if city and args.lat is not None:
        parser.error("give either a city or --lat/--lon, not both")

    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        LOGGER.error("Invalid configuration: %s", exc)
        return EXIT_USAGE

    try:
        configure_logging(args.log_level or settings.display.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    client = OpenWeatherClient.from_settings(settings, api_key=args.api_key, units=args.units)
    with client:
        controller = WeatherController(client, default_city=settings.display.default_city)
        try:
            if city:
                state = controller.search(city)
            else:
                state = controller.start(_select_locator(args))
        except ValueError as exc:
            parser.error(str(exc))

    print(render_state(state), file=out)
    return EXIT_REQUEST_FAILED if state.error else EXIT_OK


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()
