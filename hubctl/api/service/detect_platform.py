"""Detect the platform variant used to pick a service manager backend."""

import platform

# Platforms with a service manager backend (_linux = systemd, _darwin = launchd)
SUPPORTED_PLATFORMS = ("linux", "darwin")


def detect_platform() -> str:
    """Resolve the running OS to one of a closed set of variants.

    Returns:
        "linux" (systemd), "darwin" (launchd) or "unsupported"
    """
    system = platform.system().lower()
    if system in SUPPORTED_PLATFORMS:
        return system
    return "unsupported"
