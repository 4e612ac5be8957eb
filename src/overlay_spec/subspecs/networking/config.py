"""Networking Configuration Constants."""

from typing import Final

MAX_PEER_DESCRIPTOR_SIZE: Final = 10240
"""Maximum encoded size of a peer descriptor in bytes (10 KiB). Enforced by the codec."""

VERSION_COMPONENTS: Final = 3
"""Number of dot-separated components in a version string (major.minor.patch)."""

MAX_IDENTITY_KEY_LENGTH: Final = 64
"""Upper bound on the length of an opaque identity key in bytes."""

MAX_CHANNEL_ID: Final = 0xFF
"""Largest channel identifier. Channels are single-byte values."""
