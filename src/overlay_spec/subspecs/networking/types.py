"""Networking type definitions."""

from typing import Annotated, ClassVar

from pydantic import Field

from overlay_spec.types import BoundedBytes

from .config import MAX_CHANNEL_ID, MAX_IDENTITY_KEY_LENGTH

ChannelId = Annotated[int, Field(ge=0, le=MAX_CHANNEL_ID)]
"""A single-byte identifier naming an application message channel."""

NetworkId = str
"""Identifier of the chain/network a node participates in."""


class IdentityKey(BoundedBytes):
    """
    Opaque authenticated public key identifying a node.

    The core never interprets the key material. Signature checks happen
    before the descriptor reaches the compatibility check.
    """

    MIN_LENGTH: ClassVar[int] = 1
    LIMIT: ClassVar[int] = MAX_IDENTITY_KEY_LENGTH
