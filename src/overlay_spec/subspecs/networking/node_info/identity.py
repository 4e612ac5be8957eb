"""
Ed25519 node identity keypair.

The public half is what a node advertises as `identityKey` in its
descriptor. Proving possession of the private half is the job of the
authenticated transport, not of this module.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..types import IdentityKey

__all__ = [
    "IdentityKeypair",
]

PRIVATE_KEY_LENGTH = 32
"""Length of a raw ed25519 private key seed in bytes."""


@dataclass(frozen=True, slots=True)
class IdentityKeypair:
    """
    Ed25519 keypair for node identity.

    Attributes:
        private_key: The ed25519 private key.
    """

    private_key: ed25519.Ed25519PrivateKey

    @classmethod
    def generate(cls) -> IdentityKeypair:
        """Generate a new random keypair."""
        return cls(private_key=ed25519.Ed25519PrivateKey.generate())

    @classmethod
    def from_bytes(cls, data: bytes) -> IdentityKeypair:
        """
        Load keypair from a raw private key seed.

        Args:
            data: 32-byte ed25519 private key.

        Returns:
            Identity keypair.

        Raises:
            ValueError: If data is not 32 bytes long.
        """
        if len(data) != PRIVATE_KEY_LENGTH:
            raise ValueError(f"Expected {PRIVATE_KEY_LENGTH} bytes, got {len(data)}")
        return cls(private_key=ed25519.Ed25519PrivateKey.from_private_bytes(data))

    def private_key_bytes(self) -> bytes:
        """Return the raw 32-byte private key seed."""
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def public_key_bytes(self) -> bytes:
        """Return the raw 32-byte public key."""
        return self.private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )

    def identity_key(self) -> IdentityKey:
        """Public key in the form carried by peer descriptors."""
        return IdentityKey(self.public_key_bytes())
