"""Tests for the local node configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from overlay_spec.subspecs.networking.node_info import (
    IdentityKeypair,
    LocalNodeConfig,
    PeerDescriptor,
)
from tests.overlay_spec.helpers import make_identity_key


class TestLocalNodeConfig:
    """Tests for LocalNodeConfig Pydantic model."""

    def test_to_descriptor(self) -> None:
        """The configuration becomes the local descriptor."""
        config = LocalNodeConfig(
            moniker="alice",
            network="test-chain",
            listen_address="0.0.0.0:26656",
            version="1.2.3",
            channels=[0x20, 0x21],
            other=["rpc=off"],
        )

        descriptor = config.to_descriptor(make_identity_key(9))

        assert isinstance(descriptor, PeerDescriptor)
        assert descriptor.identity_key == make_identity_key(9)
        assert descriptor.moniker == "alice"
        assert descriptor.network == "test-chain"
        assert descriptor.remote_address == ""
        assert descriptor.listen_address == "0.0.0.0:26656"
        assert descriptor.version == "1.2.3"
        assert descriptor.channels == (0x20, 0x21)
        assert descriptor.other == ("rpc=off",)

    def test_to_descriptor_with_keypair_and_remote(self) -> None:
        """The descriptor carries the keypair's public key and the observed address."""
        keypair = IdentityKeypair.generate()
        config = LocalNodeConfig(
            moniker="bob", network="n", listen_address="1.1.1.1:1", version="0.1.0"
        )

        descriptor = config.to_descriptor(keypair.identity_key(), remote_address="8.8.8.8:4000")

        assert descriptor.identity_key == keypair.public_key_bytes()
        assert descriptor.remote_address == "8.8.8.8:4000"
        assert descriptor.channels == ()

    def test_strict_model_rejects_extra_fields(self) -> None:
        """LocalNodeConfig rejects unknown fields (strict mode)."""
        with pytest.raises(ValidationError):
            LocalNodeConfig(
                moniker="m",
                network="n",
                listen_address="a:1",
                version="1.0.0",
                unknown_field="oops",  # type: ignore[call-arg]
            )

    def test_from_yaml_file(self, tmp_path: Path) -> None:
        """The configuration loads from YAML with camel case keys."""
        path = tmp_path / "node.yaml"
        path.write_text(
            "moniker: carol\n"
            "network: test-chain\n"
            "listenAddress: 127.0.0.1:26656\n"
            "version: 2.0.1\n"
            "channels: [64, 65]\n"
        )

        config = LocalNodeConfig.from_yaml_file(path)

        assert config.listen_address == "127.0.0.1:26656"
        assert config.channels == (64, 65)
        assert config.other == ()
