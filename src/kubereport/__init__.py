"""kubereport package metadata."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("kubereport")
except PackageNotFoundError:
    __version__ = "0.0.1"
