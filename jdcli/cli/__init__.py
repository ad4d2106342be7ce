"""
Command-Line Interface Layer.

This package defines the Typer command tree and renders results with Rich.
"""

from .app import app

__all__ = ["app"]
