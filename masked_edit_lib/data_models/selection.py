"""
Selection and edit-result models exchanged with the embedding text field.

The text field owns the selection; it hands it to the engine with every edit
notification and receives the remapped value back in an :class:`EditResult`.
"""

from pydantic import BaseModel, Field, model_validator


class SelectionRange(BaseModel):
    """
    Cursor or highlighted range inside the buffer.

    Attributes
    ----------
    start : int
        Offset of the first selected character (or of the caret).
    end : int
        Offset just past the last selected character.  Equal to ``start``
        for a caret.  A reversed pair is normalised so that
        ``start <= end``.
    """

    start: int = Field(0, ge=0)
    end: int = Field(0, ge=0)

    @model_validator(mode="after")
    def normalise_order(self) -> "SelectionRange":
        if self.start > self.end:
            self.start, self.end = self.end, self.start
        return self

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(start=offset, end=offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end


class EditResult(BaseModel):
    """
    Rewritten field state returned after an edit notification.

    Attributes
    ----------
    text : str
        Masked content to display.
    selection : SelectionRange
        Remapped selection for the displayed content.
    raw_value : str
        Content without placeholder and literal characters.
    """

    text: str
    selection: SelectionRange
    raw_value: str
