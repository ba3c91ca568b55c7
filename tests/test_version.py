"""Test version information."""

import importlib.metadata
from kubereport import __version__


def test_version_string():
    """Test that __version__ is a valid version string."""
    assert isinstance(__version__, str)
    assert "." in __version__


def test_version_matches_package_metadata():
    """Test that __version__ matches the package metadata."""
    try:
        package_version = importlib.metadata.version("kubereport")
        assert __version__ == package_version
    except importlib.metadata.PackageNotFoundError:
        # Package not installed, skip this test
        pass
