from masked_edit_lib.masked_text import MaskedText
from masked_edit_lib.core.engine import MaskEngine
from masked_edit_lib.core.tagged_buffer import CharTag, TaggedBuffer
from masked_edit_lib.data_models import (
    SelectionRange,
    EditResult,
    MaskedTextConfig,
    load_config,
)
from masked_edit_lib.exceptions import (
    MaskedEditError,
    InvalidArgumentError,
    ReentrancyError,
)

__all__ = [
    "MaskedText",
    "MaskEngine",
    "CharTag",
    "TaggedBuffer",
    "SelectionRange",
    "EditResult",
    "MaskedTextConfig",
    "load_config",
    "MaskedEditError",
    "InvalidArgumentError",
    "ReentrancyError",
]
