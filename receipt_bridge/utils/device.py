"""Printer port naming utilities.

The same physical parallel port is addressable under more than one name
depending on the host: ``\\\\.\\LPT1`` or ``LPT1`` on Windows, ``/dev/lp0`` or
``/dev/usb/lp0`` on Linux. We accept a logical port name (``LPT1``, ``lpt2``)
and expand it into the ordered list of device paths to try.
"""

from __future__ import annotations

import platform
import re
from typing import Iterable


_LPT_RE = re.compile(r"^lpt(\d+)$", re.IGNORECASE)


def normalize_port_name(port: str | None) -> str | None:
    """Normalize a logical port name to its canonical form.

    Canonical rules:
    - stripped
    - ``lptN`` in any case becomes ``LPTN``
    - anything else (an explicit device path) is returned unchanged

    Returns None if input is None or empty/whitespace.
    """
    if port is None:
        return None
    value = port.strip()
    if not value:
        return None

    match = _LPT_RE.match(value)
    if not match:
        return value
    return f"LPT{int(match.group(1))}"


def device_path_variants(port: str | None, system: str | None = None) -> list[str]:
    """Return the device paths under which a port may be opened, in order.

    Args:
        port: Logical port name (``LPT1``) or an explicit device path
        system: Host OS name as reported by ``platform.system()``;
            detected when omitted

    Returns:
        Candidate paths, most specific first, without duplicates
    """
    normalized = normalize_port_name(port)
    if not normalized:
        return []

    system = system or platform.system()
    match = _LPT_RE.match(normalized)

    variants: list[str] = []
    if match is None:
        # Explicit path: use as given
        variants.append(normalized)
    elif system == "Windows":
        variants.extend([f"\\\\.\\{normalized}", normalized])
    else:
        # LPT1 is the first parallel port, lp0 on POSIX hosts
        index = max(int(match.group(1)) - 1, 0)
        variants.extend([f"/dev/lp{index}", f"/dev/usb/lp{index}"])

    return unique(variants)


def unique(values: Iterable[str | None]) -> list[str]:
    """De-dup non-empty values while preserving order."""
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if v is None:
            continue
        vv = v.strip()
        if vv and vv not in seen:
            seen.add(vv)
            out.append(vv)
    return out
