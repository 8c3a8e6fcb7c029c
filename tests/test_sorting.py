#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Tests for key sorting.
"""
import copy
import unittest

from json_formatter.sorting import base_key, collation_key, sort_keys


class SortKeysTests(unittest.TestCase):

    def test_case_insensitive_order(self):
        data = {"zebra": 1, "apple": 2, "banana": 3, "Cherry": 4}
        self.assertEqual(list(sort_keys(data)), ["apple", "banana", "Cherry", "zebra"])

    def test_case_sensitive_order(self):
        data = {"zebra": 1, "apple": 2, "banana": 3, "Cherry": 4}
        out = sort_keys(data, case_insensitive=False)
        self.assertEqual(list(out), ["apple", "banana", "Cherry", "zebra"])

    def test_case_sensitive_breaks_ties_by_accent_then_case(self):
        self.assertEqual(list(sort_keys({"B": 1, "b": 2, "a": 3}, case_insensitive=False)), ["a", "b", "B"])
        data = {"\u00e9": 1, "E": 2, "e": 3, "f": 4}
        self.assertEqual(list(sort_keys(data, case_insensitive=False)), ["e", "E", "\u00e9", "f"])
        self.assertEqual(collation_key("Cherry")[0], "cherry")

    def test_case_variants_keep_original_order(self):
        self.assertEqual(list(sort_keys({"b": 1, "B": 2, "a": 3})), ["a", "b", "B"])
        self.assertEqual(list(sort_keys({"B": 1, "b": 2})), ["B", "b"])

    def test_accents_compare_as_base_letters(self):
        self.assertEqual(base_key("Éclair"), "eclair")
        data = {"zeta": 1, "Éclair": 2, "apple": 3}
        self.assertEqual(list(sort_keys(data)), ["apple", "Éclair", "zeta"])

    def test_recursive(self):
        data = {"zebra": {"zoo": 1, "ant": 2, "bear": 3}, "apple": 1, "banana": 2}
        out = sort_keys(data)
        self.assertEqual(list(out), ["apple", "banana", "zebra"])
        self.assertEqual(list(out["zebra"]), ["ant", "bear", "zoo"])

    def test_non_recursive_leaves_nested_order(self):
        data = {"zebra": {"zoo": 1, "ant": 2}, "apple": [{"y": 1, "x": 2}]}
        out = sort_keys(data, recursive=False)
        self.assertEqual(list(out), ["apple", "zebra"])
        self.assertEqual(list(out["zebra"]), ["zoo", "ant"])
        self.assertEqual(list(out["apple"][0]), ["y", "x"])

    def test_arrays_keep_element_order(self):
        data = {"zebra": [3, 1, 2], "apple": ["c", "a", "b"], "list": [{"b": 1, "a": 2}, [{"d": 1, "c": 2}]]}
        out = sort_keys(data)
        self.assertEqual(out["apple"], ["c", "a", "b"])
        self.assertEqual(out["zebra"], [3, 1, 2])
        self.assertEqual(list(out["list"][0]), ["a", "b"])
        self.assertEqual(list(out["list"][1][0]), ["c", "d"])

    def test_top_level_array(self):
        out = sort_keys([{"b": 1, "a": 2}, 3, "x"])
        self.assertEqual(list(out[0]), ["a", "b"])
        self.assertEqual(out[1:], [3, "x"])

    def test_scalars_unchanged(self):
        for value in (None, True, 0, 3.5, "text"):
            self.assertEqual(sort_keys(value), value)

    def test_idempotent(self):
        data = {"b": {"d": [1, {"f": 1, "e": 2}], "c": None}, "A": 1, "a": 2}
        once = sort_keys(data)
        twice = sort_keys(once)
        self.assertEqual(once, twice)
        self.assertEqual(list(once), list(twice))
        self.assertEqual(list(once["b"]["d"][1]), list(twice["b"]["d"][1]))

    def test_input_not_mutated(self):
        data = {"b": {"z": 1, "y": 2}, "a": 1}
        before = copy.deepcopy(data)
        sort_keys(data)
        self.assertEqual(list(data), ["b", "a"])
        self.assertEqual(list(data["b"]), ["z", "y"])
        self.assertEqual(data, before)


if __name__ == '__main__':
    unittest.main()
