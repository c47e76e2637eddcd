"""
Environment driven settings for the masked-edit tools.

The mask grammar itself (class tokens, escape token, default placeholder) is
fixed and lives in :mod:`masked_edit_lib.core.mask_grammar`.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "MASKED_EDIT_"


# Default logging level
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()

# Optional log file used by the command-line tools
LOG_FILENAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", ""
).strip()
