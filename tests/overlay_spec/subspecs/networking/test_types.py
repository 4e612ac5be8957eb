"""Tests for networking type definitions."""

import pytest
from pydantic import TypeAdapter, ValidationError

from overlay_spec.subspecs.networking.config import MAX_CHANNEL_ID, MAX_IDENTITY_KEY_LENGTH
from overlay_spec.subspecs.networking.types import ChannelId, IdentityKey


class TestChannelId:
    """Tests for ChannelId."""

    def test_range(self) -> None:
        """Channel identifiers span a single byte."""
        adapter = TypeAdapter(ChannelId)

        assert adapter.validate_python(0) == 0
        assert adapter.validate_python(MAX_CHANNEL_ID) == 0xFF
        with pytest.raises(ValidationError):
            adapter.validate_python(MAX_CHANNEL_ID + 1)


class TestIdentityKey:
    """Tests for IdentityKey."""

    def test_bounds(self) -> None:
        """Identity keys are non-empty and bounded."""
        assert len(IdentityKey(b"\x01" * MAX_IDENTITY_KEY_LENGTH)) == MAX_IDENTITY_KEY_LENGTH
        with pytest.raises(ValueError):
            IdentityKey(b"")
        with pytest.raises(ValueError):
            IdentityKey(b"\x01" * (MAX_IDENTITY_KEY_LENGTH + 1))

    def test_secp256k1_sized_key(self) -> None:
        """Compressed secp256k1 keys (33 bytes) are accepted too."""
        assert len(IdentityKey(b"\x02" + b"\x00" * 32)) == 33
