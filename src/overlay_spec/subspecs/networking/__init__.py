"""Exports the networking subspec components."""

from .config import MAX_PEER_DESCRIPTOR_SIZE
from .node_info import (
    CompatibilityError,
    LocalNodeConfig,
    PeerDescriptor,
    admit_peer,
    check_compatibility,
)
from .types import ChannelId, IdentityKey, NetworkId

__all__ = [
    "MAX_PEER_DESCRIPTOR_SIZE",
    "ChannelId",
    "CompatibilityError",
    "IdentityKey",
    "LocalNodeConfig",
    "NetworkId",
    "PeerDescriptor",
    "admit_peer",
    "check_compatibility",
]
