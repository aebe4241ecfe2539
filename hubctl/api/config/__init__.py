"""Config module - immutable control configuration."""

from .CtlConfig import CtlConfig

__all__ = ["CtlConfig"]
