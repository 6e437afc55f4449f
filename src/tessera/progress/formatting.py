"""Number and duration formatting for progress cells."""

SI_PREFIXES = ("", "K", "M", "G", "T", "P", "E")


def si_scale(value: float) -> tuple[float, str]:
    """Scale ``value`` down by powers of 1000 and return the matching prefix."""
    scaled = float(value)
    for prefix in SI_PREFIXES:
        if abs(scaled) < 1000 or prefix == SI_PREFIXES[-1]:
            return scaled, prefix
        scaled /= 1000
    return scaled, SI_PREFIXES[-1]


def format_si(value: float, precision: int = 1) -> str:
    """Format ``value`` with an SI prefix, e.g. ``1500 -> '1.5K'``.

    Values below 1000 are printed without decimals.
    """
    scaled, prefix = si_scale(value)
    if not prefix:
        return f"{int(scaled)}"
    return f"{scaled:.{precision}f}{prefix}"


def format_duration(seconds: float | None) -> str:
    """Format seconds as ``H:MM:SS``; unknown durations become ``-:--:--``."""
    if seconds is None or seconds < 0:
        return "-:--:--"
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def si_divisor(prefix: str) -> int:
    """The power of 1000 that ``prefix`` stands for."""
    return 1000 ** SI_PREFIXES.index(prefix)
