"""Structured error types for slice-literal parsing and descriptor construction.

Navigation never raises: a missing key, a wrong value kind or an
out-of-bounds index all resolve to ``None``. Only malformed slice syntax and a
zero step are surfaced to the caller, through the types below.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class JMESError(Exception):
    """Base class for structured jmespath-core errors."""


class SliceErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    STEP_NOT_ALLOWED_TO_BE_ZERO = "step_not_allowed_to_be_zero"


@dataclass(frozen=True)
class JMESSliceError(JMESError, ValueError):
    """A slice literal or descriptor that cannot be built.

    ``text`` is the offending literal, or the ``repr`` of the components when
    the descriptor was constructed directly.
    """

    text: str
    kind: ClassVar[SliceErrorKind]
    summary: ClassVar[str] = "Invalid slice"

    def __str__(self) -> str:
        return f"{self.summary}: {self.text!r}"

    def __reduce__(self):
        # The frozen __setattr__ rejects BaseException's default state restore.
        return (type(self), (self.text,))


class InvalidFormat(JMESSliceError):
    """Text does not match ``[start]:[end][:[step]]``."""

    kind = SliceErrorKind.INVALID_FORMAT
    summary = "Invalid format"


class StepNotAllowedToBeZero(JMESSliceError):
    """A step component is present and equal to zero."""

    kind = SliceErrorKind.STEP_NOT_ALLOWED_TO_BE_ZERO
    summary = "Step not allowed to be zero"
