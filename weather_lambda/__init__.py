"""Weather Lambda - cached current-weather lookups by city."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-lambda")
except PackageNotFoundError:
    __version__ = "dev"
