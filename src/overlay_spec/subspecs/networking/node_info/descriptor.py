"""
Peer Descriptor
===============

The self-describing record a node discloses during the handshake.

Wire Contract
-------------

Field names on the wire are fixed and must survive any codec round-trip::

    identityKey, moniker, network, remoteAddress, listenAddress,
    version, channels, other

The encoded descriptor must not exceed `MAX_PEER_DESCRIPTOR_SIZE` bytes.
The codec enforces the limit; the descriptor only exposes it.

Validation
----------

Construction only checks field types. The version format is validated
lazily by the compatibility check, so a descriptor with a malformed
version can still be built, logged and rejected with a precise error.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from overlay_spec.types import StrictBaseModel

from ..config import MAX_PEER_DESCRIPTOR_SIZE
from ..types import ChannelId, IdentityKey, NetworkId
from . import address
from .compat import check_compatibility, check_mutual_compatibility, is_compatible


class PeerDescriptor(StrictBaseModel):
    """Identity and capability record a node presents to its peers."""

    MAX_SIZE: ClassVar[int] = MAX_PEER_DESCRIPTOR_SIZE
    """Maximum encoded size in bytes."""

    identity_key: IdentityKey
    """Authenticated public key. Uniquely identifies the node."""

    moniker: str
    """Free-form display label. Not unique."""

    network: NetworkId
    """Chain/network identifier. Must match exactly for compatibility."""

    remote_address: str = ""
    """Address of the connection as observed by the peer. Informational."""

    listen_address: str
    """`host:port` advertised for inbound connections."""

    version: str
    """Software version, `major.minor.patch`."""

    channels: tuple[ChannelId, ...] = ()
    """Supported message channels. Empty means no channel restriction."""

    other: tuple[str, ...] = ()
    """Application specific extension data. Not interpreted."""

    @field_validator("channels", "other", mode="before")
    @classmethod
    def _tupleize(cls, v: Any) -> Any:
        """Accept lists for the sequence fields while keeping the model immutable."""
        return tuple(v) if isinstance(v, list) else v

    @property
    def listen_host(self) -> str:
        """Host part of the listen address, or "" if it cannot be split."""
        return address.listen_host(self.listen_address)

    @property
    def listen_port(self) -> int:
        """Listen port, or -1 if the address cannot be split or parsed."""
        return address.listen_port(self.listen_address)

    def listen_endpoint(self) -> tuple[str, int] | None:
        """(host, port) to dial back, or None when unknown."""
        return address.listen_endpoint(self.listen_address)

    def check_compatibility(self, other: PeerDescriptor) -> None:
        """Check that `other` may connect to us. See `compat.check_compatibility`."""
        check_compatibility(self, other)

    def check_mutual_compatibility(self, other: PeerDescriptor) -> None:
        """Check compatibility in both directions."""
        check_mutual_compatibility(self, other)

    def is_compatible_with(self, other: PeerDescriptor) -> bool:
        """Check compatibility without raising."""
        return is_compatible(self, other)

    def __str__(self) -> str:
        """Human-readable summary. Field order is fixed; do not parse."""
        return (
            f"PeerDescriptor{{key: {self.identity_key.hex()}, moniker: {self.moniker}, "
            f"network: {self.network} [remote {self.remote_address}, "
            f"listen {self.listen_address}], version: {self.version} "
            f"({', '.join(self.other)})}}"
        )
