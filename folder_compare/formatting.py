"""Human-readable rendering of sizes and percentages."""

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024


def bytes_to_human(size: int) -> str:
    """Format a non-negative byte count as B, KB, MB or GB.

    Bytes are printed without decimals, larger units with two.
    """
    if size < KB:
        return f"{size}B"
    if size < MB:
        return f"{size / KB:.2f}KB"
    if size < GB:
        return f"{size / MB:.2f}MB"
    return f"{size / GB:.2f}GB"


def signed_bytes_to_human(size: int) -> str:
    """Format a byte difference, keeping the sign of negative values."""
    if size < 0:
        return "-" + bytes_to_human(-size)
    return bytes_to_human(size)


def bytes_to_gb(size: int) -> str:
    """Format a byte count as gigabytes with three decimals (no unit)."""
    return f"{size / GB:.3f}"


def percent_diff(base: int, compared: int) -> str:
    """
    Percentage change from base to compared, two decimals.

    A zero base has nothing to divide by: "0.00" when compared is also
    zero, "N/A" otherwise.
    """
    if base == 0:
        return "0.00" if compared == 0 else "N/A"
    return f"{(compared - base) / base * 100:.2f}"
