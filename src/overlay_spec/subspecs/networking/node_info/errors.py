"""Exception hierarchy for peer compatibility negotiation."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class DescriptorSide(str, Enum):
    """Which descriptor of a compatibility check an error is attributed to."""

    LOCAL = "local"
    """Our own descriptor. Errors here are misconfiguration, not the peer's fault."""

    REMOTE = "remote"
    """The descriptor presented by the peer."""


class CompatibilityError(Exception):
    """
    Base exception for all compatibility check failures.

    Every failure is terminal for the current handshake attempt.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class VersionFormatError(CompatibilityError, ValueError):
    """
    Raised when a version string is not of the form `major.minor.patch`.

    Attributes:
        version: The malformed version string.
        side: The descriptor carrying the malformed version.
    """

    def __init__(self, version: str, *, side: DescriptorSide) -> None:
        self.version = version
        self.side = side
        super().__init__(f"Invalid version format {version!r} in {side.value} descriptor")

    @property
    def is_local_fault(self) -> bool:
        """True when our own descriptor is malformed."""
        return self.side is DescriptorSide.LOCAL


class VersionMismatchError(CompatibilityError):
    """
    Base class for major/minor version disagreements.

    Attributes:
        component: Name of the differing component ("major" or "minor").
        got: The peer's value.
        expected: Our value.
    """

    component: str

    def __init__(self, *, got: str, expected: str) -> None:
        self.got = got
        self.expected = expected
        super().__init__(
            f"Peer is on a different {self.component} version. Got {got}, expected {expected}"
        )


class MajorVersionMismatchError(VersionMismatchError):
    """Raised when the major version components differ."""

    component = "major"


class MinorVersionMismatchError(VersionMismatchError):
    """Raised when the minor version components differ."""

    component = "minor"


class NetworkMismatchError(CompatibilityError):
    """
    Raised when the peers participate in different networks.

    Attributes:
        got: The peer's network identifier.
        expected: Our network identifier.
    """

    def __init__(self, *, got: str, expected: str) -> None:
        self.got = got
        self.expected = expected
        super().__init__(f"Peer is on a different network. Got {got}, expected {expected}")


class NoCommonChannelsError(CompatibilityError):
    """
    Raised when the channel sets do not intersect.

    Attributes:
        local: Our advertised channels.
        remote: The peer's advertised channels.
    """

    def __init__(self, *, local: Sequence[int], remote: Sequence[int]) -> None:
        self.local = tuple(local)
        self.remote = tuple(remote)
        super().__init__(
            f"Peer has no common channels. Our channels: {list(self.local)} ; "
            f"Peer channels: {list(self.remote)}"
        )
