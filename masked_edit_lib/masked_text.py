"""
MaskedText module
=================

Provides :class:`MaskedText`, the stateful side of the masked field: it owns
the mask, the placeholder and the tagged buffer, and is notified by the
embedding text field after every edit.  Each notification runs one
strip + format pass through :class:`~masked_edit_lib.core.engine.MaskEngine`
and hands the rewritten content and selection back as an
:class:`~masked_edit_lib.data_models.selection.EditResult`.

The text field typically pushes that result back into its widget, which in
turn reports another content change.  Such nested notifications arrive while
a pass is still running and are suppressed by the ``in_progress`` guard.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from masked_edit_lib.core.engine import MaskEngine
from masked_edit_lib.core.mask_grammar import DEFAULT_PLACEHOLDER
from masked_edit_lib.core.tagged_buffer import TaggedBuffer
from masked_edit_lib.data_models.config import MaskedTextConfig
from masked_edit_lib.data_models.selection import EditResult, SelectionRange
from masked_edit_lib.exceptions import InvalidArgumentError, ReentrancyError

TextChangedListener = Callable[[EditResult], None]


class MaskedText:
    """
    Masked content of a single text field.

    Attributes
    ----------
    logger : logging.Logger
        Logger used for pass diagnostics.
    in_progress : bool
        ``True`` while a formatting pass (including listener callbacks) runs.
    """

    def __init__(
        self,
        mask: str = "",
        placeholder: Optional[str] = DEFAULT_PLACEHOLDER,
        text: str = "",
        engine: Optional[MaskEngine] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Create the field state and format *text* when a mask is given.

        Parameters
        ----------
        mask : str
            Mask pattern; empty (the default) disables masking.
        placeholder : str | None
            Placeholder character.  ``None`` or an empty string fall back to
            a space, a longer string contributes its first character.
        text : str
            Initial content, treated as user input.
        engine : MaskEngine | None
            Engine instance to use, a new one by default.
        logger : logging.Logger | None
            Logger, ``logging.getLogger(__name__)`` by default.
        """
        config = MaskedTextConfig(mask=mask, placeholder=placeholder)
        self.logger = logger or logging.getLogger(__name__)
        self._engine = engine or MaskEngine(logger=self.logger)
        self._mask = config.mask
        self._placeholder = config.placeholder
        self._buffer = TaggedBuffer.from_text(text or "")
        self._selection = SelectionRange.caret(0)
        self._listeners: List[TextChangedListener] = []
        self._in_progress = False

        if self._mask:
            self._run_pass(self._selection)

    @classmethod
    def from_config(
        cls,
        config: MaskedTextConfig,
        text: str = "",
        logger: Optional[logging.Logger] = None,
    ) -> "MaskedText":
        return cls(
            mask=config.mask,
            placeholder=config.placeholder,
            text=text,
            logger=logger,
        )

    # ------------------------------------------------------------------ #
    @property
    def in_progress(self) -> bool:
        return self._in_progress

    def get_mask(self) -> str:
        return self._mask

    def set_mask(self, mask: str) -> EditResult:
        """
        Replace the mask and reformat the current content.

        An empty mask makes the field inert: the current content is kept
        as it is and from then on counts as user input.

        Raises
        ------
        InvalidArgumentError
            If *mask* is ``None``.
        ReentrancyError
            If called while a pass is running.
        """
        if mask is None:
            raise InvalidArgumentError("Mask must not be None")
        self._ensure_idle("set_mask")

        self._mask = mask
        if not mask:
            self._buffer = TaggedBuffer.from_text(self._buffer.text)
        return self._run_pass(self._selection)

    def get_placeholder(self) -> str:
        return self._placeholder

    def set_placeholder(self, placeholder: str) -> EditResult:
        """
        Replace the placeholder character and reformat the current content.

        Raises
        ------
        InvalidArgumentError
            If *placeholder* is ``None`` or not exactly one character.
        ReentrancyError
            If called while a pass is running.
        """
        if placeholder is None:
            raise InvalidArgumentError("Placeholder must not be None")
        if len(placeholder) != 1:
            raise InvalidArgumentError(
                f"Placeholder must be a single character, got {placeholder!r}"
            )
        self._ensure_idle("set_placeholder")

        self._placeholder = placeholder
        return self._run_pass(self._selection)

    def get_raw_value(self) -> str:
        """Current content without placeholder and literal characters."""
        return self._engine.strip(self._buffer.copy())

    def get_formatted_value(self) -> str:
        return self._buffer.text

    def get_text(self, remove_mask: bool = False) -> str:
        return self.get_raw_value() if remove_mask else self.get_formatted_value()

    def get_selection(self) -> SelectionRange:
        return self._selection.model_copy()

    # ------------------------------------------------------------------ #
    def add_text_changed_listener(self, listener: TextChangedListener) -> None:
        self._listeners.append(listener)

    def remove_text_changed_listener(self, listener: TextChangedListener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------ #
    def on_content_changed(
        self, text: str, selection_start: int, selection_end: int
    ) -> EditResult:
        """
        Accept the field content after an edit and return its masked form.

        Must be called once per discrete edit, after the edit is reflected
        in *text*.  Tags of characters the edit did not touch are preserved;
        everything that changed counts as typed by the user.

        Parameters
        ----------
        text : str
            Full field content after the edit.
        selection_start, selection_end : int
            Selection after the edit, as offsets into *text*.

        Returns
        -------
        EditResult
            Rewritten content, remapped selection and raw value.  A nested
            call made while a pass is running returns the current state
            without touching the buffer.
        """
        if self._in_progress:
            self.logger.debug("Nested content change suppressed")
            return self._result()
        if text is None:
            raise InvalidArgumentError("Text must not be None")
        selection = self._checked_selection(len(text), selection_start, selection_end)

        self._buffer.apply_text(text, caret=selection.end)
        return self._run_pass(selection)

    def replace(self, start: int, end: int, text: str) -> EditResult:
        """
        Replace ``[start, end)`` of the current content with *text* and
        reformat, leaving the caret after the inserted text.
        """
        if self._in_progress:
            self.logger.debug("Nested replace suppressed")
            return self._result()
        if text is None:
            raise InvalidArgumentError("Text must not be None")
        self._checked_selection(len(self._buffer), start, end)
        if start > end:
            raise InvalidArgumentError(f"Range start {start} is after end {end}")

        self._buffer.replace(start, end, text)
        return self._run_pass(SelectionRange.caret(start + len(text)))

    # ------------------------------------------------------------------ #
    def _run_pass(self, selection: SelectionRange) -> EditResult:
        with self._formatting():
            self._buffer, self._selection = self._engine.reformat(
                self._mask, self._placeholder, self._buffer, selection
            )
            result = self._result()
            for listener in list(self._listeners):
                listener(result)
        return result

    @contextmanager
    def _formatting(self) -> Iterator[None]:
        assert not self._in_progress, "formatting guard left set"
        self._in_progress = True
        try:
            yield
        finally:
            self._in_progress = False

    def _ensure_idle(self, operation: str) -> None:
        if self._in_progress:
            raise ReentrancyError(f"{operation} called during a formatting pass")

    def _result(self) -> EditResult:
        return EditResult(
            text=self._buffer.text,
            selection=self._selection.model_copy(),
            raw_value=self.get_raw_value(),
        )

    @staticmethod
    def _checked_selection(length: int, start: int, end: int) -> SelectionRange:
        for offset in (start, end):
            if offset is None or not 0 <= offset <= length:
                raise InvalidArgumentError(
                    f"Selection offset {offset} outside [0, {length}]"
                )
        return SelectionRange(start=start, end=end)
