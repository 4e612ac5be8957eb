"""
Listen address parsing.

Descriptors advertise where they accept inbound connections as `host:port`.
IPv6 literals are bracketed: `[::1]:26656`.
"""

from __future__ import annotations

MIN_PORT = 0
MAX_PORT = 65535

MAX_PORT_VALUE = 2**63 - 1
"""Largest value port text may hold before parsing fails (signed 64-bit)."""

MAX_PORT_DIGITS = len(str(MAX_PORT_VALUE))


class AddressFormatError(ValueError):
    """Raised when an address cannot be split into host and port."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"{reason} in address {address!r}")


def split_host_port(address: str) -> tuple[str, str]:
    """
    Split `host:port` into its host and port text.

    The port is not interpreted. Brackets around an IPv6 host are removed.

    Raises:
        AddressFormatError: If the address has no port, too many colons,
            or misplaced brackets.
    """
    i = address.rfind(":")
    if i < 0:
        raise AddressFormatError(address, "missing port")

    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise AddressFormatError(address, "missing ']'")
        if end + 1 == len(address):
            raise AddressFormatError(address, "missing port")
        if end + 1 != i:
            # Either "[host]x:port" or "[a]:b:c".
            if address[end + 1] == ":":
                raise AddressFormatError(address, "too many colons")
            raise AddressFormatError(address, "missing port")
        host = address[1:end]
        if "[" in host:
            raise AddressFormatError(address, "unexpected '['")
    else:
        host = address[:i]
        if ":" in host:
            raise AddressFormatError(address, "too many colons")
        if "[" in host:
            raise AddressFormatError(address, "unexpected '['")

    port = address[i + 1 :]
    if "]" in host or "]" in port:
        raise AddressFormatError(address, "unexpected ']'")
    return host, port


def parse_port(port: str) -> int | None:
    """
    Parse decimal port text.

    Returns None unless the text is plain ASCII digits whose value fits a
    signed 64-bit integer. Leading zeros are allowed.
    """
    if not port or not port.isascii() or not port.isdigit():
        return None
    # Bound the length before int() so oversized text cannot raise.
    digits = port.lstrip("0") or "0"
    if len(digits) > MAX_PORT_DIGITS:
        return None
    value = int(digits)
    return value if value <= MAX_PORT_VALUE else None


def listen_host(address: str) -> str:
    """Host part of `address`, or an empty string if it cannot be split."""
    try:
        host, _ = split_host_port(address)
    except AddressFormatError:
        return ""
    return host


def listen_port(address: str) -> int:
    """Port of `address`, or -1 if it cannot be split or parsed."""
    try:
        _, port = split_host_port(address)
    except AddressFormatError:
        return -1
    value = parse_port(port)
    return -1 if value is None else value


def listen_endpoint(address: str) -> tuple[str, int] | None:
    """
    Host and port of `address`, or None when either is unavailable.

    Unlike `listen_host` / `listen_port`, no sentinel can be mistaken for a
    real value. Ports outside the TCP range also yield None.
    """
    try:
        host, port_text = split_host_port(address)
    except AddressFormatError:
        return None
    port = parse_port(port_text)
    if port is None or not MIN_PORT <= port <= MAX_PORT:
        return None
    return host, port
