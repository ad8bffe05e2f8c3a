"""Human-readable byte sizes."""

BYTE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_bytes(n: int) -> str:
    """Format a byte count with binary units and two decimals.

    Args:
        n: Non-negative byte count

    Returns:
        String such as ``"1.50 KiB"``. Values beyond the largest unit stay in EiB.

    Example:
        >>> format_bytes(1536)
        '1.50 KiB'
    """
    value = float(n)
    unit = 0
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {BYTE_UNITS[unit]}"
