"""
Construction-time configuration of a masked field.

Embeddings usually receive the mask and placeholder from some attribute or
style lookup.  :class:`MaskedTextConfig` is the validated form of those two
values; :func:`load_config` reads it from a JSON file.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from masked_edit_lib.core.mask_grammar import DEFAULT_PLACEHOLDER


class MaskedTextConfig(BaseModel):
    """
    Mask and placeholder supplied when a field is created.

    An absent or empty placeholder falls back to the default (a space); a
    longer string contributes only its first character.
    """

    mask: str = Field("", description="Mask pattern, empty disables masking")
    placeholder: Optional[str] = Field(
        DEFAULT_PLACEHOLDER, description="Filler for unfilled class positions"
    )

    @field_validator("mask", mode="before")
    @classmethod
    def validate_mask(cls, v: Optional[str]) -> str:
        return "" if v is None else v

    @field_validator("placeholder", mode="before")
    @classmethod
    def validate_placeholder(cls, v: Optional[str]) -> str:
        if not v:
            return DEFAULT_PLACEHOLDER
        return str(v)[0]


def load_config(path: Union[str, Path]) -> MaskedTextConfig:
    """
    Read a :class:`MaskedTextConfig` from a JSON file.

    Parameters
    ----------
    path : str | Path
        File holding an object with optional ``mask`` and ``placeholder``
        keys.

    Returns
    -------
    MaskedTextConfig
        The validated configuration.
    """
    with open(path, "r", encoding="utf-8") as f:
        return MaskedTextConfig(**json.load(f))
