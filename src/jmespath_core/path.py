"""Fluent chaining over the navigation primitives.

``Path(doc).identify("people").list_project(lambda p: p.identify("first")).value``
reads left to right the way a JMESPath expression does. Projection
transforms receive each element wrapped in a :class:`Path` and may return a
``Path`` or a raw value.
"""

from __future__ import annotations

from typing import Callable, Union

from . import primitives
from .slices import SliceLike
from .values import Value, values_equal

PathTransform = Callable[["Path"], Union["Path", Value]]


def _unwrap(result: Union["Path", Value]) -> Value:
    if isinstance(result, Path):
        return result.value
    return result


def _lift(transform: PathTransform) -> primitives.Transform:
    def apply(item: Value) -> Value:
        return _unwrap(transform(Path(item)))

    return apply


class Path:
    __slots__ = ("value",)

    def __init__(self, value: Value) -> None:
        self.value = value

    def identify(self, key: str) -> "Path":
        return Path(primitives.identify(self.value, key))

    def index(self, i: int) -> "Path":
        return Path(primitives.index(self.value, i))

    def slice(self, descriptor: SliceLike) -> "Path":
        return Path(primitives.slice(self.value, descriptor))

    def list_project(self, transform: PathTransform) -> "Path":
        return Path(primitives.list_project(self.value, _lift(transform)))

    def slice_project(self, descriptor: SliceLike, transform: PathTransform) -> "Path":
        return Path(primitives.slice_project(self.value, descriptor, _lift(transform)))

    def object_project(self, transform: PathTransform) -> "Path":
        return Path(primitives.object_project(self.value, _lift(transform)))

    def flatten(self) -> "Path":
        return Path(primitives.flatten(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return values_equal(self.value, other.value)

    def __repr__(self) -> str:
        return f"Path({self.value!r})"
