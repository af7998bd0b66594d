"""unitconv – interactive temperature, length and mass converter."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "dispatcher",
    "errors",
    "formatting",
    "request",
    "units",
    "utils",
]
