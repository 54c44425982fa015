"""Encode JSON values as TOON, a compact line-oriented notation."""

__version__ = "0.1.1"