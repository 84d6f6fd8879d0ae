"""Dicer: roll tabletop dice expressions such as ``2d6+3-1d4``."""

__version__ = "0.1.0"
