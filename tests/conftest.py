"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure repo root is importable during test collection.
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from masked_edit_lib import MaskedText  # noqa: E402

PHONE_MASK = "(999) 999-9999"


def type_text(field: MaskedText, text: str) -> None:
    """Feed *text* one keystroke at a time at the current caret."""
    for ch in text:
        caret = field.get_selection().end
        field.replace(caret, caret, ch)


def type_as_widget(field: MaskedText, text: str) -> None:
    """Like :func:`type_text`, but report each edit as a full-text snapshot."""
    for ch in text:
        current = field.get_formatted_value()
        caret = field.get_selection().end
        edited = current[:caret] + ch + current[caret:]
        field.on_content_changed(edited, caret + 1, caret + 1)


@pytest.fixture
def phone_field() -> MaskedText:
    return MaskedText(mask=PHONE_MASK)
