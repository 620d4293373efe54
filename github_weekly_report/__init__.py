"""Weekly GitHub activity reports built from a contributor's event stream."""

__version__ = "0.1.0"
