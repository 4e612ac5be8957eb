"""
Shared pytest fixtures for networking tests.

Provides a local descriptor and a compatible remote descriptor.
"""

from __future__ import annotations

import pytest

from overlay_spec.subspecs.networking.node_info import PeerDescriptor
from tests.overlay_spec.helpers import make_descriptor, make_identity_key


@pytest.fixture
def local_descriptor() -> PeerDescriptor:
    """Our own descriptor."""
    return make_descriptor()


@pytest.fixture
def remote_descriptor() -> PeerDescriptor:
    """A peer compatible with `local_descriptor`."""
    return make_descriptor(
        identity_key=make_identity_key(2),
        moniker="node-2",
        listen_address="10.0.0.2:26656",
        version="1.2.7",
        channels=(4, 5, 2),
    )
