"""Format a byte count the way ``ls -lh`` does."""


def human_size(size: int) -> str:
    """Return ``size`` as a short human readable string (e.g. ``1.5K``, ``12M``)."""
    value = float(size)
    for unit in ("B", "K", "M", "G", "T"):
        if value < 1024 or unit == "T":
            if unit == "B":
                return f"{int(value)}B"
            return f"{value:.1f}{unit}" if value < 10 else f"{value:.0f}{unit}"
        value /= 1024
    return f"{size}B"  # pragma: no cover
