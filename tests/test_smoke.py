"""Smoke tests for the weather display package.

These tests verify basic package structure and imports work correctly.
"""

import pathlib


def test_package_imports():
    """Test that main package can be imported."""
    import weather_display

    assert weather_display.__version__


def test_public_modules_import():
    """Test that every public module imports cleanly."""
    from weather_display import app, cli, conditions, config, view_model
    from weather_display.clients import openweather

    for module in (app, cli, conditions, config, view_model, openweather):
        assert module is not None


def test_project_structure():
    """Verify critical project files exist."""
    project_root = pathlib.Path(__file__).resolve().parents[1]

    critical_files = [
        "pyproject.toml",
        "README.md",
        ".env.sample",
        "src/weather_display/__init__.py",
    ]
    missing = [name for name in critical_files if not (project_root / name).exists()]
    assert not missing, f"Missing project files: {missing}"
