"""Test helpers for overlay-spec unit tests."""

from .builders import make_descriptor, make_identity_key

__all__ = [
    "make_descriptor",
    "make_identity_key",
]
