"""
Tagged text buffer.

:class:`TaggedBuffer` stores the editable text together with a per-character
:class:`CharTag`.  The tag tells the engine whether a character was typed by
the user or synthesized from the mask, so synthesized characters can be
stripped before the mask is applied again.

Position tracking is handled by :class:`Anchor` objects registered on the
buffer.  Every insert or delete at an offset strictly before an anchor shifts
it; an insertion exactly at the anchor offset leaves the anchor where it is
(the inserted character ends up after it).
"""

from enum import Enum
from typing import Iterable, List, Optional


class CharTag(str, Enum):
    USER = "user"
    PLACEHOLDER = "placeholder"
    LITERAL = "literal"


class Anchor:
    """Offset into a :class:`TaggedBuffer` that follows inserts and deletes."""

    def __init__(self, offset: int):
        self.offset = offset

    def __repr__(self) -> str:
        return f"Anchor({self.offset})"


class TaggedBuffer:
    """
    Ordered sequence of characters, each carrying exactly one :class:`CharTag`.

    The buffer is mutated in place by the engine.  Tags are derived data: the
    public contract of :class:`~masked_edit_lib.masked_text.MaskedText` never
    lets a caller set them directly.
    """

    def __init__(
        self,
        chars: Optional[Iterable[str]] = None,
        tags: Optional[Iterable[CharTag]] = None,
    ):
        self._chars: List[str] = list(chars or [])
        if tags is None:
            self._tags: List[CharTag] = [CharTag.USER] * len(self._chars)
        else:
            self._tags = list(tags)
        if len(self._tags) != len(self._chars):
            raise ValueError("Every character needs exactly one tag")
        self._anchors: List[Anchor] = []

    @classmethod
    def from_text(cls, text: str, tag: CharTag = CharTag.USER) -> "TaggedBuffer":
        return cls(text, [tag] * len(text))

    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"TaggedBuffer({self.text!r})"

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def tags(self) -> List[CharTag]:
        return list(self._tags)

    def char_at(self, index: int) -> str:
        return self._chars[index]

    def tag_at(self, index: int) -> CharTag:
        return self._tags[index]

    def user_chars(self) -> str:
        """Characters tagged ``USER``, in order."""
        return "".join(
            ch for ch, tag in zip(self._chars, self._tags) if tag is CharTag.USER
        )

    def copy(self) -> "TaggedBuffer":
        """Copy characters and tags; anchors are not carried over."""
        return TaggedBuffer(self._chars, self._tags)

    # ------------------------------------------------------------------ #
    def add_anchor(self, offset: int) -> Anchor:
        anchor = Anchor(max(0, min(offset, len(self._chars))))
        self._anchors.append(anchor)
        return anchor

    def remove_anchor(self, anchor: Anchor) -> None:
        self._anchors.remove(anchor)

    # ------------------------------------------------------------------ #
    def insert(self, index: int, ch: str, tag: CharTag) -> None:
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"Insert position {index} out of range")
        self._chars.insert(index, ch)
        self._tags.insert(index, tag)
        for anchor in self._anchors:
            if index < anchor.offset:
                anchor.offset += 1

    def delete(self, index: int) -> None:
        del self._chars[index]
        del self._tags[index]
        for anchor in self._anchors:
            if index < anchor.offset:
                anchor.offset -= 1

    def set_tag(self, index: int, tag: CharTag) -> None:
        self._tags[index] = tag

    def replace(self, start: int, end: int, text: str) -> None:
        """
        Replace ``[start, end)`` with *text*, tagging the new characters as
        user content.
        """
        if not 0 <= start <= end <= len(self._chars):
            raise IndexError(f"Range [{start}, {end}) out of range")
        for _ in range(end - start):
            self.delete(start)
        for offset, ch in enumerate(text):
            self.insert(start + offset, ch, CharTag.USER)

    def apply_text(self, new_text: str, caret: Optional[int] = None) -> None:
        """
        Bring the buffer in line with a full snapshot of edited text.

        Characters of the unchanged common prefix and suffix keep their
        tags; the characters in between are treated as freshly typed user
        content.  When *caret* (the cursor offset after the edit) is given,
        the changed span is made to end at it, so a typed character equal
        to its neighbours is tagged where it was actually typed.
        """
        old_text = self.text
        limit = min(len(old_text), len(new_text))
        prefix_limit = limit
        suffix_limit = limit
        if caret is not None:
            growth = max(0, len(new_text) - len(old_text))
            prefix_limit = max(0, min(limit, caret - growth))
            suffix_limit = max(0, min(limit, len(new_text) - caret))

        prefix = 0
        while prefix < prefix_limit and old_text[prefix] == new_text[prefix]:
            prefix += 1

        suffix = 0
        while (
            suffix < min(suffix_limit, limit - prefix)
            and old_text[-1 - suffix] == new_text[-1 - suffix]
        ):
            suffix += 1

        self.replace(
            prefix, len(old_text) - suffix, new_text[prefix : len(new_text) - suffix]
        )
