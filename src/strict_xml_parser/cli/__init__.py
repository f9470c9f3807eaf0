"""Command-line interface module for the strict XML parser."""

from .main import main

__all__ = ["main"]
