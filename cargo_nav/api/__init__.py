"""API module for cargo-nav.

Functions defined here are the single source of truth for the CLI: each
``cmd_*`` function returns a StageResult that the CLI layer renders.
"""

__all__ = []
