"""Fail fast when the caller lacks root privilege."""

import os

from ..ControlError import PrivilegeRequiredError


def _require_root() -> None:
    """Raise PrivilegeRequiredError unless the effective uid is 0."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None or geteuid() != 0:
        raise PrivilegeRequiredError()
