"""Connection helpers for the Scaleway CLI: SSH, serial console, paths."""

__version__ = "1.0.0"
