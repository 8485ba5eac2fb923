"""API module for alts.

Command functions here return StageResult objects and are the single
source of truth for the CLI.
"""

__all__ = []
