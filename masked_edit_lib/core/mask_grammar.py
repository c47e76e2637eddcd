"""
Mask grammar helpers.

A mask is a plain string scanned left to right.  Every character is one of:

* a *class token* – ``9`` (digit), ``A`` (letter), ``*`` (letter or digit)
  or ``?`` (any character),
* the *escape token* ``\\`` – the following mask character is emitted as a
  literal even when it is a class token,
* anything else – a literal emitted verbatim.

The tokens are fixed constants and cannot be reconfigured.
"""

from dataclasses import dataclass
from typing import Iterator

NUMBER_TOKEN = "9"
ALPHA_TOKEN = "A"
ALPHANUMERIC_TOKEN = "*"
CHARACTER_TOKEN = "?"
ESCAPE_TOKEN = "\\"

DEFAULT_PLACEHOLDER = " "

CLASS_TOKENS = frozenset(
    [NUMBER_TOKEN, ALPHA_TOKEN, ALPHANUMERIC_TOKEN, CHARACTER_TOKEN]
)


@dataclass(frozen=True)
class MaskPosition:
    """
    One consumed position of a mask.

    Attributes
    ----------
    token : str
        The mask character (class token or literal character).
    is_literal : bool
        ``True`` when the position emits ``token`` verbatim.
    """

    token: str
    is_literal: bool


def is_class_token(ch: str) -> bool:
    return ch in CLASS_TOKENS


def is_escape_token(ch: str) -> bool:
    return ch == ESCAPE_TOKEN


def match_class(token: str, ch: str) -> bool:
    """
    Check whether *ch* may be placed at a position holding class *token*.

    The tests run in a fixed order and the first one that matches wins:
    any character, letter, digit, letter-or-digit.

    Parameters
    ----------
    token : str
        One of the class tokens.
    ch : str
        A single buffer character.

    Returns
    -------
    bool
        ``True`` when the character satisfies the class.
    """
    return (
        token == CHARACTER_TOKEN
        or (token == ALPHA_TOKEN and ch.isalpha())
        or (token == NUMBER_TOKEN and ch.isdecimal())
        or (token == ALPHANUMERIC_TOKEN and (ch.isdecimal() or ch.isalpha()))
    )


def iter_mask(mask: str) -> Iterator[MaskPosition]:
    """
    Walk *mask* once and yield every position it consumes.

    Escape tokens yield nothing themselves; they only turn the next mask
    character into a literal.  An escape token at the very end of the mask
    has nothing to act on and is dropped.
    """
    escape_active = False
    for token in mask:
        if not escape_active and is_class_token(token):
            yield MaskPosition(token=token, is_literal=False)
        elif not escape_active and is_escape_token(token):
            escape_active = True
        else:
            escape_active = False
            yield MaskPosition(token=token, is_literal=True)


def mask_length(mask: str) -> int:
    """Number of buffer positions a fully formatted buffer holds for *mask*."""
    return sum(1 for _ in iter_mask(mask))
