"""Reusable, strict base models for the overlay specification."""

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `listen_address` in a Python model will be
    represented as `listenAddress` when it is serialized to JSON.

    The camel case names are the fixed identifiers every descriptor codec
    must preserve.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        coerce_numbers_to_str=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))

    @classmethod
    def from_yaml_file(cls, path: Path) -> Self:
        """
        Load and validate a model from a YAML document.

        Files are hand-written, so values are validated in lax mode
        (YAML sequences become tuples, hex strings become byte types and
        unquoted numbers such as `version: 1.2` become strings, leaving the
        version format to the compatibility check).

        Args:
            path: Path to the YAML file.

        Returns:
            Validated model instance.
        """
        with path.open() as f:
            return cls.model_validate(yaml.safe_load(f) or {}, strict=False)


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
