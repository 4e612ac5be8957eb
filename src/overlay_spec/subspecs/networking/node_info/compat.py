"""
Compatibility Checker
=====================

Decides whether a peer that just completed the handshake exchange may
proceed to an established session.

Rules, evaluated in order (the first failure is reported):

1. Our own version must be well-formed (otherwise we are misconfigured).
2. The peer's version must be well-formed.
3. Major versions must match.
4. Minor versions must match. Patch is never compared.
5. Networks must match exactly.
6. If we advertise no channels we accept any channel set.
7. Otherwise the channel sets must intersect.

Directionality
--------------

Rule 6 only looks at the *local* channels, so the relation is not
symmetric: a descriptor with no channels accepts everyone, while the peer
applies its own rule when it evaluates us. Whether both directions are
checked before admitting a peer is up to the caller.
`check_mutual_compatibility` runs both channel rules for callers that want it.

The check is a pure function of its inputs. It never mutates either
descriptor and needs no synchronization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import (
    CompatibilityError,
    DescriptorSide,
    NetworkMismatchError,
    NoCommonChannelsError,
)
from .version import parse_version

if TYPE_CHECKING:
    from .descriptor import PeerDescriptor


def _check_channels(ours: PeerDescriptor, theirs: PeerDescriptor) -> None:
    """Apply the channel rule from the point of view of `ours`."""
    # No channels means we are testing or channel-agnostic.
    if not ours.channels:
        return
    if set(ours.channels).isdisjoint(theirs.channels):
        raise NoCommonChannelsError(local=ours.channels, remote=theirs.channels)


def check_compatibility(local: PeerDescriptor, remote: PeerDescriptor) -> None:
    """
    Check whether `remote` is compatible with `local`.

    Args:
        local: Our own descriptor.
        remote: The descriptor the peer presented.

    Raises:
        VersionFormatError: If either version is malformed. `side` tells which.
        MajorVersionMismatchError: If the major versions differ.
        MinorVersionMismatchError: If the minor versions differ.
        NetworkMismatchError: If the networks differ.
        NoCommonChannelsError: If we restrict channels and share none.
    """
    local_version = parse_version(local.version, side=DescriptorSide.LOCAL)
    remote_version = parse_version(remote.version, side=DescriptorSide.REMOTE)

    local_version.check_compatible_with(remote_version)

    if local.network != remote.network:
        raise NetworkMismatchError(got=remote.network, expected=local.network)

    _check_channels(local, remote)


def check_mutual_compatibility(local: PeerDescriptor, remote: PeerDescriptor) -> None:
    """
    Check compatibility in both directions.

    Version and network rules are symmetric, so only the peer's channel
    rule is re-applied after the forward check. The error always reports
    channels from our point of view.

    Raises:
        CompatibilityError: The first failing rule, as in `check_compatibility`.
    """
    check_compatibility(local, remote)
    if remote.channels and set(remote.channels).isdisjoint(local.channels):
        raise NoCommonChannelsError(local=local.channels, remote=remote.channels)


def is_compatible(local: PeerDescriptor, remote: PeerDescriptor) -> bool:
    """Boolean form of `check_compatibility`."""
    try:
        check_compatibility(local, remote)
    except CompatibilityError:
        return False
    return True
