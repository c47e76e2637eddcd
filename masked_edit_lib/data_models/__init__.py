from masked_edit_lib.data_models.selection import SelectionRange, EditResult
from masked_edit_lib.data_models.config import MaskedTextConfig, load_config

__all__ = ["SelectionRange", "EditResult", "MaskedTextConfig", "load_config"]
