"""Tests for the package's public interface."""
import reverseendian


def test_public_names_resolve():
    for name in reverseendian.__all__:
        assert hasattr(reverseendian, name), name


def test_version_comes_from_packaging_only():
    assert "__version__" not in vars(reverseendian)
