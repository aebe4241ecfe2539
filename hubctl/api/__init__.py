"""API module for comelit-hub-ctl.

Functions defined here are the single source of truth for the CLI commands.
Each ``cmd_*`` function returns a StageResult and never prints.
"""

__all__ = []
