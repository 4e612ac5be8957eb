"""
Peer Descriptor & Compatibility Specification
=============================================

This module specifies the record nodes exchange during the handshake and
the admission policy applied to it.

Overview
--------

Before a session is established each side discloses a `PeerDescriptor`:

- Identity (opaque public key, moniker)
- Network/chain identifier
- Listen and observed remote addresses
- Software version (`major.minor.patch`)
- Supported message channels and extension data

The receiving side runs `check_compatibility(local, remote)`. Any error
aborts the handshake and the connection is closed.
"""

from .address import AddressFormatError, split_host_port
from .admission import AdmissionDecision, Verdict, admit_peer
from .compat import check_compatibility, check_mutual_compatibility, is_compatible
from .config import LocalNodeConfig
from .descriptor import PeerDescriptor
from .errors import (
    CompatibilityError,
    DescriptorSide,
    MajorVersionMismatchError,
    MinorVersionMismatchError,
    NetworkMismatchError,
    NoCommonChannelsError,
    VersionFormatError,
    VersionMismatchError,
)
from .identity import IdentityKeypair
from .version import ProtocolVersion, parse_version

__all__ = [
    "AddressFormatError",
    "AdmissionDecision",
    "CompatibilityError",
    "DescriptorSide",
    "IdentityKeypair",
    "LocalNodeConfig",
    "MajorVersionMismatchError",
    "MinorVersionMismatchError",
    "NetworkMismatchError",
    "NoCommonChannelsError",
    "PeerDescriptor",
    "ProtocolVersion",
    "Verdict",
    "VersionFormatError",
    "VersionMismatchError",
    "admit_peer",
    "check_compatibility",
    "check_mutual_compatibility",
    "is_compatible",
    "parse_version",
    "split_host_port",
]
