"""
Custom exception hierarchy for the masked-edit library.

Malformed data (unknown mask characters, input that does not fit the mask,
overlong pastes) is never an error; it is absorbed by the formatting pass.
The exceptions below report programmer errors only.  All of them inherit from
:class:`MaskedEditError`.
"""


class MaskedEditError(Exception):
    """Base exception for all masked-edit errors."""

    pass


class InvalidArgumentError(MaskedEditError, ValueError):
    """Raised when a mutator receives a missing or malformed argument."""

    pass


class ReentrancyError(MaskedEditError, RuntimeError):
    """Raised when the mask or placeholder is changed from inside a running pass."""

    pass
