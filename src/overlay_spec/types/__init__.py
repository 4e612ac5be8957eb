"""Reusable type definitions for the overlay specification."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BoundedBytes

__all__ = [
    "BoundedBytes",
    "CamelModel",
    "StrictBaseModel",
]
