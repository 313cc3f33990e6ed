from __future__ import annotations

import builtins
import copy
import unittest
from unittest import mock

from jmespath_core import primitives
from jmespath_core.errors import InvalidFormat, StepNotAllowedToBeZero
from jmespath_core.primitives import flatten, identify, index, list_project, object_project, slice, slice_project
from jmespath_core.slices import SliceDescriptor, parse_slice


def _flatmap():
    return {"a": "foo", "b": "bar", "c": "baz"}


def _nested_map():
    return {"a": {"b": {"c": {"d": "value"}}}}


def _array():
    return ["a", "b", "c", "d", "e", "f"]


def _complex():
    return {"a": {"b": {"c": [{"d": [0, [1, 2]]}, {"d": [3, 4]}]}}}


_NON_ARRAYS = (None, True, False, 0, 2.5, "text", {}, {"a": [1]})
_NON_OBJECTS = (None, True, 0, 2.5, "text", [], [{"a": 1}])


class IdentifyTests(unittest.TestCase):
    def test_identifier(self) -> None:
        self.assertEqual(identify(_flatmap(), "a"), "foo")
        self.assertIsNone(identify(_flatmap(), "d"))

    def test_nested_identifiers(self) -> None:
        out = identify(identify(identify(identify(_nested_map(), "a"), "b"), "c"), "d")
        self.assertEqual(out, "value")

    def test_present_null_and_absent_key_are_indistinguishable(self) -> None:
        self.assertIsNone(identify({"k": None}, "k"))
        self.assertIsNone(identify({}, "k"))

    def test_non_object_inputs_resolve_to_null(self) -> None:
        for value in _NON_OBJECTS:
            with self.subTest(value=value):
                self.assertIsNone(identify(value, "a"))

    def test_source_is_not_mutated(self) -> None:
        doc = _flatmap()
        identify(doc, "a")
        self.assertEqual(doc, _flatmap())


class IndexTests(unittest.TestCase):
    def test_index_from_front_and_rear(self) -> None:
        self.assertEqual(index(_array(), 1), "b")
        self.assertEqual(index(_array(), 0), "a")
        self.assertEqual(index(_array(), -1), "f")
        self.assertEqual(index(_array(), -6), "a")

    def test_out_of_bounds_is_null(self) -> None:
        for i in (6, 10, -7, -10):
            with self.subTest(i=i):
                self.assertIsNone(index(_array(), i))
        self.assertIsNone(index([], 0))
        self.assertIsNone(index([], -1))

    def test_non_array_inputs_resolve_to_null(self) -> None:
        for value in _NON_ARRAYS:
            with self.subTest(value=value):
                self.assertIsNone(index(value, 0))

    def test_combined_navigation(self) -> None:
        out = index(index(identify(index(identify(identify(identify(_complex(), "a"), "b"), "c"), 0), "d"), 1), 0)
        self.assertEqual(out, 1)


class SliceTests(unittest.TestCase):
    def test_slicing_literals(self) -> None:
        cases = {
            "0:4:1": [0, 1, 2, 3],
            "0:4": [0, 1, 2, 3],
            "0:3": [0, 1, 2],
            ":2": [0, 1],
            "::2": [0, 2],
            "::-1": [3, 2, 1, 0],
            "-2:": [2, 3],
            "100::-1": [3, 2, 1, 0],
            "-100:2": [0, 1],
            "10:20": [],
            "3:1": [],
            "2:0:-1": [2, 1],
            "-1:-3:-1": [3, 2],
            ":-100:-1": [3, 2, 1, 0],
            "1::-2": [1],
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(slice([0, 1, 2, 3], parse_slice(text)), expected)

    def test_default_descriptor_is_identity(self) -> None:
        for value in ([], [1], [0, 1, 2, 3], [{"a": 1}, [2], None]):
            with self.subTest(value=value):
                out = slice(value, SliceDescriptor())
                self.assertEqual(out, value)
                self.assertIsNot(out, value)

    def test_descriptor_coercions(self) -> None:
        self.assertEqual(slice([0, 1, 2, 3], "1:3"), [1, 2])
        self.assertEqual(slice([0, 1, 2, 3], range(0, 2)), [0, 1])
        self.assertEqual(slice([0, 1, 2, 3], builtins.slice(None, None, -2)), [3, 1])

    def test_non_array_inputs_resolve_to_null(self) -> None:
        for value in _NON_ARRAYS:
            with self.subTest(value=value):
                self.assertIsNone(slice(value, SliceDescriptor()))

    def test_malformed_descriptor_raises_for_any_value(self) -> None:
        for value in ([1, 2], {"a": 1}, None):
            with self.subTest(value=value):
                with self.assertRaises(StepNotAllowedToBeZero):
                    slice(value, "::0")
                with self.assertRaises(InvalidFormat):
                    slice(value, "not a slice")
                with self.assertRaises(StepNotAllowedToBeZero):
                    slice_project(value, "::0", lambda v: v)


class DetachedResultsTests(unittest.TestCase):
    def test_results_share_structure_by_default(self) -> None:
        doc = {"inner": {"k": [1, 2]}}
        with mock.patch.object(primitives, "_DETACH_RESULTS", False):
            self.assertIs(identify(doc, "inner"), doc["inner"])

    def test_detached_results_do_not_alias_the_input(self) -> None:
        doc = {"inner": {"k": [1, 2]}, "rows": [[1], [2]]}
        snapshot = copy.deepcopy(doc)
        with mock.patch.object(primitives, "_DETACH_RESULTS", True):
            inner = identify(doc, "inner")
            row = index(doc["rows"], 0)
            rows = slice(doc["rows"], "::-1")
            flat = flatten([doc["rows"]])

        self.assertEqual(inner, {"k": [1, 2]})
        self.assertIsNot(inner, doc["inner"])
        self.assertIsNot(row, doc["rows"][0])
        self.assertIsNot(rows[1], doc["rows"][0])
        self.assertIsNot(flat[0], doc["rows"][0])
        inner["k"].append(3)
        row.append(9)
        self.assertEqual(doc, snapshot)


class NonArrayProjectionInputsTests(unittest.TestCase):
    def test_array_only_primitives(self) -> None:
        def fail(_value):
            raise AssertionError("transform must not be called")

        for value in _NON_ARRAYS:
            with self.subTest(value=value):
                self.assertIsNone(list_project(value, fail))
                self.assertIsNone(slice_project(value, SliceDescriptor(), fail))
                self.assertIsNone(flatten(value))

    def test_object_only_primitives(self) -> None:
        for value in _NON_OBJECTS:
            with self.subTest(value=value):
                self.assertIsNone(object_project(value, lambda v: v))


if __name__ == "__main__":
    unittest.main()
