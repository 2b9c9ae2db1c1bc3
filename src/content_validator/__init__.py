"""content_validator: consistency checks for game genre catalogs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("content-validator")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
