"""jmespath-core public API."""

from .errors import (
    InvalidFormat,
    JMESError,
    JMESSliceError,
    SliceErrorKind,
    StepNotAllowedToBeZero,
)
from .path import Path
from .primitives import (
    flatten,
    identify,
    index,
    list_project,
    object_project,
    slice,
    slice_project,
)
from .slices import SliceDescriptor, as_slice_descriptor, parse_slice, slice_cache_stats
from .values import (
    ValueInfo,
    ValueKind,
    is_null,
    is_truthy,
    kind_of,
    to_value,
    validate_value,
    value_info,
    values_equal,
)

__all__ = [
    "identify",
    "index",
    "slice",
    "list_project",
    "slice_project",
    "object_project",
    "flatten",
    "Path",
    "SliceDescriptor",
    "parse_slice",
    "as_slice_descriptor",
    "slice_cache_stats",
    "ValueKind",
    "ValueInfo",
    "kind_of",
    "value_info",
    "is_null",
    "is_truthy",
    "values_equal",
    "validate_value",
    "to_value",
    "JMESError",
    "JMESSliceError",
    "InvalidFormat",
    "StepNotAllowedToBeZero",
    "SliceErrorKind",
]
