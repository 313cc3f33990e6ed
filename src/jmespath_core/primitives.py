"""Navigation, projection and flatten primitives over JSON values.

Every primitive is total: a wrong value kind, a missing key or an
out-of-bounds index yields ``None`` instead of raising. Inputs are never
mutated and every returned array is a new list.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Final

from .slices import SliceLike, as_slice_descriptor
from .values import Value, detach, is_null

logger = logging.getLogger(__name__)

_DETACH_RESULTS: Final[bool] = os.environ.get("JMESPATH_CORE_DETACH_RESULTS", "0") == "1"

Transform = Callable[[Value], Value]


def _extracted(value: Value) -> Value:
    if _DETACH_RESULTS:
        return detach(value)
    return value


def identify(value: Value, key: str) -> Value:
    if not isinstance(value, dict):
        return None
    return _extracted(value.get(key))


def index(value: Value, i: int) -> Value:
    if not isinstance(value, list):
        return None
    if i < 0:
        # Rear-addressing; too far back is out of bounds, not clamped.
        offset = len(value) + i
        if offset < 0:
            return None
    else:
        offset = i
    if offset >= len(value):
        return None
    return _extracted(value[offset])


def slice(value: Value, descriptor: SliceLike) -> Value:
    """Stride-slice an array; bounds clamp to the sequence like Python slicing.

    The descriptor is coerced before the value kind is checked, so a malformed
    descriptor raises whatever the value is.
    """
    desc = as_slice_descriptor(descriptor)
    if not isinstance(value, list):
        return None
    logger.debug("slicing %d elements with %s", len(value), desc)
    return _extracted(value[desc.start : desc.end : desc.step])


def list_project(value: Value, transform: Transform) -> Value:
    if not isinstance(value, list):
        return None
    results = []
    for item in value:
        result = transform(item)
        if not is_null(result):
            results.append(result)
    return results


def slice_project(value: Value, descriptor: SliceLike, transform: Transform) -> Value:
    desc = as_slice_descriptor(descriptor)
    if not isinstance(value, list):
        return None
    return list_project(slice(value, desc), transform)


def object_project(value: Value, transform: Transform) -> Value:
    """Project over the values of an object; the result is always an array."""
    if not isinstance(value, dict):
        return None
    results = []
    for item in value.values():
        result = transform(item)
        if not is_null(result):
            results.append(result)
    return results


def flatten(value: Value) -> Value:
    """Splice nested arrays into their parent, one level per call."""
    if not isinstance(value, list):
        return None
    results: list[Value] = []
    for item in value:
        if isinstance(item, list):
            results.extend(item)
        else:
            results.append(item)
    return _extracted(results)
