"""Tests for common_extensions package."""


def test_package_imports():
    """Test that the package can be imported successfully."""
    import common_extensions

    assert common_extensions is not None


def test_package_version():
    """Test that the package has a version string."""
    from common_extensions import __version__

    assert __version__ == "0.1.0"


def test_helpers_exported_at_top_level():
    """Test that the core helpers are re-exported from the package root."""
    import common_extensions

    assert common_extensions.join(["a", None, "b"], ",") == "a,b"
    assert common_extensions.LineEndingStyle.UNIX == "unix"
