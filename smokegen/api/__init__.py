"""API module for smokegen.

Functions defined here are the single source of truth for the CLI commands.
"""

__all__ = []
