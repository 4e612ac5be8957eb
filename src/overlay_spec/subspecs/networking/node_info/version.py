"""
Protocol version strings.

Nodes advertise their software version as `major.minor.patch`. Only the
major and minor components take part in compatibility: patch releases are
wire-compatible by definition.

Components are compared exactly as advertised, as strings. No numeric
normalisation is applied, so "01" and "1" are different versions.
"""

from __future__ import annotations

from typing import NamedTuple

from ..config import VERSION_COMPONENTS
from .errors import (
    DescriptorSide,
    MajorVersionMismatchError,
    MinorVersionMismatchError,
    VersionFormatError,
)


class ProtocolVersion(NamedTuple):
    """A parsed `major.minor.patch` version."""

    major: str
    minor: str
    patch: str

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def check_compatible_with(self, other: ProtocolVersion) -> None:
        """
        Check that `other` (the peer's version) may talk to `self` (ours).

        Raises:
            MajorVersionMismatchError: If the major components differ.
            MinorVersionMismatchError: If the minor components differ.
        """
        if self.major != other.major:
            raise MajorVersionMismatchError(got=other.major, expected=self.major)
        if self.minor != other.minor:
            raise MinorVersionMismatchError(got=other.minor, expected=self.minor)

    def is_compatible_with(self, other: ProtocolVersion) -> bool:
        """Check whether the major and minor components match."""
        return self.major == other.major and self.minor == other.minor


def parse_version(version: str, *, side: DescriptorSide = DescriptorSide.REMOTE) -> ProtocolVersion:
    """
    Split a version string into its three components.

    Args:
        version: Text of the form `major.minor.patch`.
        side: Descriptor the version belongs to, recorded on failure.

    Returns:
        The parsed version.

    Raises:
        VersionFormatError: If there are not exactly three non-empty components.
    """
    parts = version.split(".")
    if len(parts) != VERSION_COMPONENTS or not all(parts):
        raise VersionFormatError(version, side=side)
    major, minor, patch = parts
    return ProtocolVersion(major, minor, patch)
