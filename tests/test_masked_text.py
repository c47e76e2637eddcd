"""Tests for the stateful masked field contract."""

from __future__ import annotations

from typing import List

import pytest

from masked_edit_lib import (
    EditResult,
    InvalidArgumentError,
    MaskedText,
    MaskedTextConfig,
    ReentrancyError,
    SelectionRange,
)

from conftest import PHONE_MASK, type_as_widget, type_text


def test_initial_content_is_formatted(phone_field: MaskedText) -> None:
    assert phone_field.get_formatted_value() == "(   )    -    "
    assert phone_field.get_raw_value() == ""
    assert phone_field.get_selection() == SelectionRange.caret(0)


def test_typing_phone_number(phone_field: MaskedText) -> None:
    type_text(phone_field, "5551234567")
    assert phone_field.get_formatted_value() == "(555) 123-4567"
    assert phone_field.get_raw_value() == "5551234567"
    assert phone_field.get_selection() == SelectionRange.caret(14)


def test_typing_phone_number_through_snapshots(phone_field: MaskedText) -> None:
    type_as_widget(phone_field, "5551234567")
    assert phone_field.get_formatted_value() == "(555) 123-4567"
    assert phone_field.get_raw_value() == "5551234567"


def test_caret_follows_typed_digit(phone_field: MaskedText) -> None:
    result = phone_field.replace(0, 0, "5")
    assert result.text == "(5  )    -    "
    assert result.selection == SelectionRange.caret(2)
    assert result.raw_value == "5"


def test_paste_into_date_field() -> None:
    field = MaskedText(mask="99/99/9999")
    result = field.on_content_changed("13132024", 8, 8)
    assert result.text == "13/13/2024"
    assert result.selection == SelectionRange.caret(10)


def test_rejected_first_char_changes_nothing() -> None:
    field = MaskedText(mask="AA-999")
    assert field.get_formatted_value() == "  -   "

    result = field.on_content_changed("1  -   ", 1, 1)
    assert result.text == "  -   "
    assert result.raw_value == ""
    assert result.selection == SelectionRange.caret(0)


def test_escaped_literal_mask() -> None:
    field = MaskedText(mask="\\9999")
    type_text(field, "123")
    assert field.get_formatted_value() == "9123"
    assert field.get_raw_value() == "123"


def test_empty_mask_makes_field_inert(phone_field: MaskedText) -> None:
    type_text(phone_field, "5551234567")
    result = phone_field.set_mask("")

    assert phone_field.get_mask() == ""
    assert result.text == "(555) 123-4567"

    result = phone_field.on_content_changed("(555) 123-4567x", 15, 15)
    assert result.text == "(555) 123-4567x"
    assert result.raw_value == "(555) 123-4567x"
    assert result.selection == SelectionRange.caret(15)


def test_remasking_inert_content(phone_field: MaskedText) -> None:
    type_text(phone_field, "5551234567")
    phone_field.set_mask("")
    phone_field.set_mask(PHONE_MASK)
    assert phone_field.get_formatted_value() == "(555) 123-4567"
    assert phone_field.get_raw_value() == "5551234567"


def test_set_mask_reformats_raw_value(phone_field: MaskedText) -> None:
    type_text(phone_field, "5551234567")
    assert phone_field.set_mask("999-999-9999").text == "555-123-4567"
    assert phone_field.set_mask("999").text == "555"
    assert phone_field.get_raw_value() == "555"


def test_set_placeholder_reformats(phone_field: MaskedText) -> None:
    type_text(phone_field, "555")
    result = phone_field.set_placeholder("_")
    assert phone_field.get_placeholder() == "_"
    assert result.text == "(555) ___-____"
    assert result.raw_value == "555"


def test_get_text_with_and_without_mask(phone_field: MaskedText) -> None:
    type_text(phone_field, "555")
    assert phone_field.get_text() == "(555)    -    "
    assert phone_field.get_text(remove_mask=True) == "555"


def test_raw_value_does_not_mutate_buffer(phone_field: MaskedText) -> None:
    type_text(phone_field, "55")
    before = phone_field.get_formatted_value()
    phone_field.get_raw_value()
    assert phone_field.get_formatted_value() == before


def test_constructor_formats_initial_text() -> None:
    field = MaskedText(mask="99/99/9999", text="01022024")
    assert field.get_formatted_value() == "01/02/2024"


def test_constructor_without_mask_keeps_text() -> None:
    field = MaskedText(text="anything")
    assert field.get_formatted_value() == "anything"
    assert field.get_raw_value() == "anything"


@pytest.mark.parametrize("placeholder,expected", [(None, " "), ("", " "), ("#$", "#")])
def test_constructor_placeholder_fallback(placeholder, expected: str) -> None:
    field = MaskedText(mask="99", placeholder=placeholder)
    assert field.get_placeholder() == expected
    assert field.get_formatted_value() == expected * 2


def test_from_config() -> None:
    config = MaskedTextConfig(mask="AA-999", placeholder="_")
    field = MaskedText.from_config(config, text="ab1")
    assert field.get_formatted_value() == "ab-1__"


def test_delete_selected_range(phone_field: MaskedText) -> None:
    type_text(phone_field, "5551234567")
    result = phone_field.replace(6, 9, "")
    assert result.text == "(555) 456-7   "
    assert result.raw_value == "5554567"
    assert 0 <= result.selection.start <= len(result.text)


def test_null_arguments_rejected(phone_field: MaskedText) -> None:
    with pytest.raises(InvalidArgumentError):
        phone_field.set_mask(None)
    with pytest.raises(InvalidArgumentError):
        phone_field.set_placeholder(None)
    with pytest.raises(InvalidArgumentError):
        phone_field.set_placeholder("ab")
    with pytest.raises(InvalidArgumentError):
        phone_field.on_content_changed(None, 0, 0)


def test_selection_out_of_range_rejected(phone_field: MaskedText) -> None:
    with pytest.raises(InvalidArgumentError):
        phone_field.on_content_changed("123", 0, 4)
    with pytest.raises(InvalidArgumentError):
        phone_field.on_content_changed("123", -1, 0)
    with pytest.raises(InvalidArgumentError):
        phone_field.replace(0, 40, "1")
    with pytest.raises(InvalidArgumentError):
        phone_field.replace(3, 1, "x")


def test_listener_receives_result(phone_field: MaskedText) -> None:
    received: List[EditResult] = []
    phone_field.add_text_changed_listener(received.append)

    phone_field.replace(0, 0, "5")
    assert [r.text for r in received] == ["(5  )    -    "]

    phone_field.remove_text_changed_listener(received.append)
    phone_field.replace(2, 2, "5")
    assert len(received) == 1


def test_nested_notification_is_suppressed(phone_field: MaskedText) -> None:
    nested: List[EditResult] = []

    def push_back(result: EditResult) -> None:
        assert phone_field.in_progress
        nested.append(
            phone_field.on_content_changed(
                result.text + "999", result.selection.start, result.selection.end
            )
        )

    phone_field.add_text_changed_listener(push_back)
    result = phone_field.replace(0, 0, "5")

    assert nested[0] == result
    assert phone_field.get_formatted_value() == "(5  )    -    "
    assert not phone_field.in_progress


def test_mask_change_inside_pass_raises_and_resets_guard(
    phone_field: MaskedText,
) -> None:
    def change_mask(result: EditResult) -> None:
        phone_field.set_mask("999")

    phone_field.add_text_changed_listener(change_mask)
    with pytest.raises(ReentrancyError):
        phone_field.replace(0, 0, "5")

    assert not phone_field.in_progress
    phone_field.remove_text_changed_listener(change_mask)
    assert phone_field.set_mask("999").text == "5  "


def test_typed_placeholder_char_stays_in_place_through_snapshots() -> None:
    keystrokes = MaskedText(mask="???")
    type_text(keystrokes, " a")

    snapshots = MaskedText(mask="???")
    type_as_widget(snapshots, " a")

    assert snapshots.get_formatted_value() == keystrokes.get_formatted_value() == " a "
    assert snapshots.get_raw_value() == " a"
    assert snapshots.get_selection() == SelectionRange.caret(2)


def test_snapshot_edit_ends_at_reported_caret() -> None:
    field = MaskedText(mask="???")
    result = field.on_content_changed("    ", 1, 1)
    assert result.text == "   "
    assert result.raw_value == " "
    assert result.selection == SelectionRange.caret(1)


def test_pass_with_guard_left_set_fails_loudly(phone_field: MaskedText) -> None:
    phone_field._in_progress = True
    with pytest.raises(AssertionError):
        phone_field._run_pass(phone_field.get_selection())
