"""Name and signal list validation."""

import re
from collections import Counter
from collections.abc import Iterable
from typing import Any

from .errors import DuplicateSignalError, InvalidNameError, InvalidScanRateError

NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def is_valid_name(name: Any) -> bool:
    """Check if a name is a non-empty identifier of letters, digits and underscores."""
    return isinstance(name, str) and NAME_PATTERN.fullmatch(name) is not None


def check_name(name: Any, kind: str = "signal") -> str:
    """Return the name unchanged, or raise InvalidNameError."""
    if not is_valid_name(name):
        raise InvalidNameError(f"Illegal {kind} name {name!r}")
    return name


def find_duplicates(items: Iterable[Any]) -> list[Any]:
    """Return each item that occurs more than once, in first-seen order."""
    return [item for item, count in Counter(items).items() if count > 1]


def check_signals(signals: Iterable[Any]) -> None:
    """Raise DuplicateSignalError if any two signals are equal."""
    duplicates = find_duplicates(signals)
    if duplicates:
        names = ", ".join(f"{sig.name} ({sig.direction})" for sig in duplicates)
        raise DuplicateSignalError(f"Duplicate signals not allowed in an IceCube: {names}")


def is_valid_scan_rate(scan_rate: Any) -> bool:
    """Check if a scan rate is a string that fits inside one quoted SCAN field."""
    return isinstance(scan_rate, str) and not any(c in scan_rate for c in '"\r\n')


def check_scan_rate(scan_rate: Any, owner: str) -> str:
    """Return the scan rate unchanged, or raise InvalidScanRateError."""
    if not is_valid_scan_rate(scan_rate):
        raise InvalidScanRateError(f"Illegal scan rate {scan_rate!r} for {owner}")
    return scan_rate
