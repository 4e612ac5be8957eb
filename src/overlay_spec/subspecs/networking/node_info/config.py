"""
Local node configuration.

A node builds exactly one descriptor for itself at startup, from this
configuration and its identity key.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from overlay_spec.types import StrictBaseModel

from ..types import ChannelId, IdentityKey, NetworkId
from .descriptor import PeerDescriptor


class LocalNodeConfig(StrictBaseModel):
    """Operator-supplied settings for the local descriptor."""

    moniker: str
    """Display label shown to peers."""

    network: NetworkId
    """Network to join. Peers on other networks are rejected."""

    listen_address: str
    """`host:port` to advertise for inbound connections."""

    version: str
    """Software version advertised to peers, `major.minor.patch`."""

    channels: tuple[ChannelId, ...] = ()
    """Channels served by this node. Leave empty to accept any peer channels."""

    other: tuple[str, ...] = ()
    """Extension data passed through to peers."""

    @field_validator("channels", "other", mode="before")
    @classmethod
    def _tupleize(cls, v: Any) -> Any:
        """Accept lists for the sequence fields."""
        return tuple(v) if isinstance(v, list) else v

    def to_descriptor(self, identity_key: IdentityKey, remote_address: str = "") -> PeerDescriptor:
        """
        Build the local peer descriptor.

        Args:
            identity_key: Public identity key of this node.
            remote_address: Address of the connection as seen by the peer, if known.

        Returns:
            Descriptor to disclose during the handshake.
        """
        return PeerDescriptor(
            identity_key=identity_key,
            moniker=self.moniker,
            network=self.network,
            remote_address=remote_address,
            listen_address=self.listen_address,
            version=self.version,
            channels=self.channels,
            other=self.other,
        )
