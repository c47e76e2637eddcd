"""
Mask engine
===========

Provides :class:`MaskEngine`, the algorithm that keeps a
:class:`~masked_edit_lib.core.tagged_buffer.TaggedBuffer` in line with a mask:

* :meth:`MaskEngine.strip` removes every placeholder and literal character,
  leaving only what the user typed.
* :meth:`MaskEngine.format` co-scans the mask and the buffer once, keeping
  matching user characters, discarding the ones a class position rejects,
  and inserting placeholders and literals where the mask demands them.
* :meth:`MaskEngine.reformat` is the strip + format sequence run after every
  edit.

The engine holds no per-call state.  The selection is remapped through
anchors registered on the buffer, so every insertion or deletion in front of
the caret moves it by the same amount.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from masked_edit_lib.core.mask_grammar import iter_mask, match_class
from masked_edit_lib.core.tagged_buffer import Anchor, CharTag, TaggedBuffer
from masked_edit_lib.data_models.selection import SelectionRange


class MaskEngine:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------ #
    def strip(self, buffer: TaggedBuffer) -> str:
        """
        Delete every ``PLACEHOLDER`` and ``LITERAL`` character in place.

        Stripping a buffer that holds only user characters is a no-op.

        Parameters
        ----------
        buffer : TaggedBuffer
            Buffer to strip.

        Returns
        -------
        str
            The remaining user characters, in order.
        """
        index = 0
        while index < len(buffer):
            if buffer.tag_at(index) is CharTag.USER:
                index += 1
            else:
                buffer.delete(index)
        return buffer.text

    def format(
        self,
        mask: str,
        placeholder: str,
        buffer: TaggedBuffer,
        selection: SelectionRange,
    ) -> Tuple[TaggedBuffer, SelectionRange]:
        """
        Apply *mask* to *buffer* in place and remap *selection*.

        Parameters
        ----------
        mask : str
            Mask pattern.  An empty mask leaves buffer and selection untouched.
        placeholder : str
            Single character written at class positions without user input.
        buffer : TaggedBuffer
            Buffer to format, usually freshly stripped.
        selection : SelectionRange
            Selection in terms of the buffer before the pass.

        Returns
        -------
        Tuple[TaggedBuffer, SelectionRange]
            The formatted buffer (same object) and the remapped selection.
        """
        if not mask:
            return buffer, selection

        with self._tracked(buffer, selection) as anchors:
            self._apply_mask(mask, placeholder, buffer)
        return buffer, self._selection_from(anchors)

    def reformat(
        self,
        mask: str,
        placeholder: str,
        buffer: TaggedBuffer,
        selection: SelectionRange,
    ) -> Tuple[TaggedBuffer, SelectionRange]:
        """Strip synthesized characters, then format; selection follows both."""
        if not mask:
            return buffer, selection

        with self._tracked(buffer, selection) as anchors:
            raw = self.strip(buffer)
            self._apply_mask(mask, placeholder, buffer)
        self.logger.debug(
            "Reformatted %r with mask %r -> %r", raw, mask, buffer.text
        )
        return buffer, self._selection_from(anchors)

    # ------------------------------------------------------------------ #
    def _apply_mask(self, mask: str, placeholder: str, buffer: TaggedBuffer) -> int:
        consumed = 0
        for position in iter_mask(mask):
            token = position.token
            if position.is_literal:
                if consumed < len(buffer) and buffer.char_at(consumed) == token:
                    buffer.set_tag(consumed, CharTag.LITERAL)
                else:
                    buffer.insert(consumed, token, CharTag.LITERAL)
            else:
                # retry the same class position until a character fits
                while consumed < len(buffer) and not match_class(
                    token, buffer.char_at(consumed)
                ):
                    self.logger.debug(
                        "Rejected %r at class %r", buffer.char_at(consumed), token
                    )
                    buffer.delete(consumed)
                if consumed == len(buffer):
                    buffer.insert(consumed, placeholder, CharTag.PLACEHOLDER)
            consumed += 1

        while len(buffer) > consumed:
            buffer.delete(len(buffer) - 1)
        return consumed

    @staticmethod
    @contextmanager
    def _tracked(
        buffer: TaggedBuffer, selection: SelectionRange
    ) -> Iterator[List[Anchor]]:
        anchors = [
            buffer.add_anchor(selection.start),
            buffer.add_anchor(selection.end),
        ]
        try:
            yield anchors
        finally:
            for anchor in anchors:
                buffer.remove_anchor(anchor)

    @staticmethod
    def _selection_from(anchors: List[Anchor]) -> SelectionRange:
        start, end = anchors
        return SelectionRange(start=start.offset, end=end.offset)
