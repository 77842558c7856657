from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Quantity = Union[str, int, float, Decimal, None]

# Binary suffixes must be checked before the single-letter decimal ones.
_BINARY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024) ** 2,
    "Gi": Decimal(1024) ** 3,
    "Ti": Decimal(1024) ** 4,
    "Pi": Decimal(1024) ** 5,
    "Ei": Decimal(1024) ** 6,
}

_DECIMAL_SUFFIXES = {
    "n": Decimal("0.000000001"),
    "u": Decimal("0.000001"),
    "m": Decimal("0.001"),
    "k": Decimal(1000),
    "M": Decimal(1000) ** 2,
    "G": Decimal(1000) ** 3,
    "T": Decimal(1000) ** 4,
    "P": Decimal(1000) ** 5,
    "E": Decimal(1000) ** 6,
}

_MILLI_PER_CORE = Decimal(1000)
_BYTES_PER_MB = Decimal(1000) * 1000


def parse_quantity(quantity: Quantity) -> Decimal:
    """
    Parse a Kubernetes resource quantity (e.g. '250m', '1Gi', '500M') into
    base units: cores for CPU, bytes for memory.
    Unparsable values are treated as zero.
    """
    if quantity is None:
        return Decimal(0)
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)

    text = str(quantity).strip()
    multiplier = Decimal(1)
    if text[-2:] in _BINARY_SUFFIXES:
        multiplier = _BINARY_SUFFIXES[text[-2:]]
        text = text[:-2]
    elif text[-1:] in _DECIMAL_SUFFIXES:
        multiplier = _DECIMAL_SUFFIXES[text[-1:]]
        text = text[:-1]

    try:
        return Decimal(text) * multiplier
    except (InvalidOperation, ValueError):
        return Decimal(0)


def parse_optional_quantity(quantity: Quantity) -> Optional[Decimal]:
    """Like parse_quantity, but keeps 'not declared' distinct from zero."""
    if quantity is None or (isinstance(quantity, str) and not quantity.strip()):
        return None
    return parse_quantity(quantity)


def to_millicores(cores: Optional[Decimal]) -> Decimal:
    """Converts cores to millicores (1000 = 1 core)."""
    if cores is None:
        return Decimal(0)
    return cores * _MILLI_PER_CORE


def to_megabytes(size_bytes: Optional[Decimal]) -> Decimal:
    """Converts bytes to decimal megabytes (1 MB = 1,000,000 bytes)."""
    if size_bytes is None:
        return Decimal(0)
    return size_bytes / _BYTES_PER_MB


def usage_percent(current: Decimal, configured: Optional[Decimal]) -> int:
    """
    Percentage of the configured limit in use, truncated to an integer.
    Returns 0 when no limit is configured.
    """
    if not configured:
        return 0
    return int(current / configured * 100)
