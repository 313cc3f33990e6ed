"""Slice descriptors and the ``[start]:[end][:[step]]`` literal grammar."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Union

from .errors import InvalidFormat, StepNotAllowedToBeZero

logger = logging.getLogger(__name__)


def _cache_size(raw: str) -> int:
    return max(1, int(raw))


_SLICE_CACHE_MAX: Final[int] = _cache_size(os.environ.get("JMESPATH_CORE_SLICE_CACHE_MAX", "512"))

_SLICE_RE: Final = re.compile(
    r"""
    (?P<start>-?[0-9]+)?
    :
    (?P<end>-?[0-9]+)?
    (?::(?P<step>-?[0-9]+)?)?
    """,
    re.VERBOSE,
)


def _check_component(name: str, value: object) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"slice {name} must be an int or None, not {type(value).__name__}")


def _render(start: int | None, end: int | None, step: int | None) -> str:
    text = f"{'' if start is None else start}:{'' if end is None else end}"
    if step is not None:
        text += f":{step}"
    return text


@dataclass(frozen=True)
class SliceDescriptor:
    """Optional start, end and non-zero step of a stride slice.

    The default descriptor is the identity slice. An absent step means a
    forward unit stride; a zero step is rejected at construction.
    """

    start: int | None = None
    end: int | None = None
    step: int | None = None

    def __post_init__(self) -> None:
        _check_component("start", self.start)
        _check_component("end", self.end)
        _check_component("step", self.step)
        if self.step == 0:
            raise StepNotAllowedToBeZero(_render(self.start, self.end, self.step))

    @classmethod
    def from_range(cls, value: range) -> "SliceDescriptor":
        step = None if value.step == 1 else value.step
        return cls(start=value.start, end=value.stop, step=step)

    @classmethod
    def from_slice(cls, value: slice) -> "SliceDescriptor":
        return cls(start=value.start, end=value.stop, step=value.step)

    def to_slice(self) -> slice:
        return slice(self.start, self.end, self.step)

    def __str__(self) -> str:
        return _render(self.start, self.end, self.step)


SliceLike = Union[SliceDescriptor, str, slice, range]


def _optional_int(text: str | None) -> int | None:
    if text is None:
        return None
    return int(text)


@lru_cache(maxsize=_SLICE_CACHE_MAX)
def _parse_slice_cached(text: str) -> SliceDescriptor:
    match = _SLICE_RE.fullmatch(text)
    if match is None:
        logger.debug("rejecting slice literal %r: invalid format", text)
        raise InvalidFormat(text)
    step = _optional_int(match.group("step"))
    if step == 0:
        logger.debug("rejecting slice literal %r: zero step", text)
        raise StepNotAllowedToBeZero(text)
    return SliceDescriptor(
        start=_optional_int(match.group("start")),
        end=_optional_int(match.group("end")),
        step=step,
    )


def parse_slice(text: str) -> SliceDescriptor:
    """Parse ``[start]:[end][:[step]]`` into a :class:`SliceDescriptor`.

    Raises :class:`InvalidFormat` when the text does not match the grammar and
    :class:`StepNotAllowedToBeZero` when a step is present and equal to zero.
    An empty step (``"1:2:"``) is absent, not zero.
    """
    if not isinstance(text, str):
        raise InvalidFormat(repr(text))
    return _parse_slice_cached(text)


def as_slice_descriptor(value: SliceLike) -> SliceDescriptor:
    if isinstance(value, SliceDescriptor):
        return value
    if isinstance(value, str):
        return parse_slice(value)
    if isinstance(value, slice):
        return SliceDescriptor.from_slice(value)
    if isinstance(value, range):
        return SliceDescriptor.from_range(value)
    raise TypeError(f"cannot build a slice descriptor from {type(value).__name__}")


def slice_cache_stats(*, reset: bool = False) -> dict[str, float | int]:
    info = _parse_slice_cached.cache_info()
    total = info.hits + info.misses
    stats: dict[str, float | int] = {
        "hits": info.hits,
        "misses": info.misses,
        "size": int(info.currsize),
        "max_size": int(info.maxsize) if info.maxsize is not None else 0,
        "hit_rate": float(info.hits / total) if total else 0.0,
    }
    if reset:
        _parse_slice_cached.cache_clear()
    return stats
