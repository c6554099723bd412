"""Content Hub admin service."""

__version__ = "0.1.0"
