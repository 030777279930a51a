"""Library version information."""

MAJOR_VERSION = 0
MINOR_VERSION = 16
MICRO_VERSION = 99

VERSION = "0.16.99"
VERSION_NUM = (MAJOR_VERSION << 16) | (MINOR_VERSION << 8) | MICRO_VERSION


def version() -> str:
    """Return the library version as a dotted string."""
    return VERSION


def version_num() -> int:
    """Return the version packed into an int: major, minor and micro in 8-bit fields."""
    return VERSION_NUM