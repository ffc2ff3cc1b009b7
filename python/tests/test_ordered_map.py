#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_ordered_map.py
-------------------

Behaviour every balancing strategy must share. The same test body runs
once per strategy through the `_OrderedMapContract` mixin.
"""

import operator
import random
import unittest

from avl_tree import AVL
from ordered_map import STRATEGIES, OrderedMap, resolve_strategy
from red_black_tree import RED_BLACK


class _OrderedMapContract:
    strategy = None

    def make(self, items=None, **kwargs):
        return OrderedMap(items, strategy=self.strategy, **kwargs)

    # ------------------------------------------------------------------
    #  Empty tree
    # ------------------------------------------------------------------
    def test_empty_tree_behaviour(self):
        tree = self.make()
        self.assertTrue(tree.empty())
        self.assertEqual(tree.size(), 0)
        self.assertEqual(len(tree), 0)
        self.assertFalse(tree)
        self.assertEqual(tree.begin(), tree.end())
        self.assertEqual(tree.cbegin(), tree.cend())
        self.assertEqual(list(tree), [])
        self.assertEqual(tree.find(1), tree.end())
        self.assertFalse(tree.erase(1))
        with self.assertRaises(ValueError):
            tree.min_key()
        tree.validate()

    # ------------------------------------------------------------------
    #  Insert / find
    # ------------------------------------------------------------------
    def test_insert_find_and_duplicate(self):
        tree = self.make()
        pos, inserted = tree.insert(10, "ten")
        self.assertTrue(inserted)
        self.assertEqual(pos.item, (10, "ten"))
        self.assertEqual(tree.size(), 1)

        again, inserted = tree.insert(10, "TEN")
        self.assertFalse(inserted)
        self.assertEqual(again, pos)
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.find(10).value, "ten")
        self.assertEqual(tree[10], "ten")

    def test_missing_key_lookups(self):
        tree = self.make([(1, "a")])
        with self.assertRaises(KeyError):
            tree[2]
        with self.assertRaises(KeyError):
            del tree[2]
        self.assertIsNone(tree.get(2))
        self.assertEqual(tree.get(2, "zz"), "zz")
        self.assertEqual(tree.get(1), "a")
        self.assertIn(1, tree)
        self.assertNotIn(2, tree)

    # ------------------------------------------------------------------
    #  Erase
    # ------------------------------------------------------------------
    def test_erase_two_child_node(self):
        tree = self.make((k, str(k)) for k in [20, 10, 30, 5, 15, 25, 35])
        self.assertTrue(tree.erase(20))
        self.assertEqual(tree.find(20), tree.end())
        self.assertEqual(list(tree), [5, 10, 15, 25, 30, 35])
        self.assertEqual(tree.size(), 6)
        tree.validate()

    def test_erase_missing_key_changes_nothing(self):
        tree = self.make((k, k) for k in range(10))
        before = tree.items()
        self.assertFalse(tree.erase(42))
        self.assertEqual(tree.size(), 10)
        self.assertEqual(tree.items(), before)

    def test_erase_by_position(self):
        tree = self.make([(1, "a"), (2, "b"), (3, "c")])
        pos = tree.find(2)
        self.assertNotEqual(pos, tree.end())
        self.assertTrue(tree.erase(pos))
        self.assertEqual(tree.find(2), tree.end())
        self.assertEqual(tree.size(), 2)
        tree.validate()

    def test_erase_by_read_only_position(self):
        tree = self.make([(1, "a"), (2, "b")])
        self.assertTrue(tree.erase(tree.cbegin()))
        self.assertEqual(list(tree), [2])

    def test_erase_end_position_raises(self):
        tree = self.make([(1, "a")])
        with self.assertRaises(IndexError):
            tree.erase(tree.end())
        self.assertEqual(tree.size(), 1)

    def test_erase_foreign_position_raises(self):
        tree = self.make([(1, "a")])
        other = self.make([(1, "a")])
        with self.assertRaises(ValueError):
            tree.erase(other.find(1))
        self.assertEqual(tree.size(), 1)
        self.assertEqual(other.size(), 1)

    def test_insert_all_then_erase_all(self):
        keys = list(range(200))
        random.Random(7).shuffle(keys)
        tree = self.make((k, -k) for k in keys)
        self.assertEqual(tree.size(), 200)
        random.Random(8).shuffle(keys)
        for k in keys:
            self.assertTrue(tree.erase(k))
        fresh = self.make()
        self.assertEqual(tree.size(), fresh.size())
        self.assertEqual(tree.empty(), fresh.empty())
        self.assertEqual(list(tree), list(fresh))
        self.assertEqual(tree.begin(), tree.end())
        tree.validate()

    # ------------------------------------------------------------------
    #  Clear
    # ------------------------------------------------------------------
    def test_clear(self):
        tree = self.make((k, k) for k in range(50))
        tree.clear()
        self.assertTrue(tree.empty())
        self.assertEqual(tree.size(), 0)
        self.assertEqual(list(tree), [])
        # The tree is fully usable again afterwards
        tree.insert(3, 3)
        self.assertEqual(tree.items(), [(3, 3)])
        tree.validate()

    def test_clear_detaches_nodes_under_old_positions(self):
        tree = self.make((k, k) for k in range(1, 8))
        kept = tree.find(2)
        tree.clear()
        self.assertTrue(kept.advance().is_end())
        self.assertFalse(tree.erase(2))
        self.assertTrue(tree.empty())

    # ------------------------------------------------------------------
    #  Construction, ordering and views
    # ------------------------------------------------------------------
    def test_construct_from_pairs_first_pair_wins(self):
        tree = self.make([(2, "b"), (1, "a"), (2, "B")])
        self.assertEqual(tree.items(), [(1, "a"), (2, "b")])

    def test_construct_from_other_map(self):
        source = self.make([(3, "c"), (1, "a"), (2, "b")])
        copy = OrderedMap(source, strategy="red-black")
        self.assertEqual(copy.items(), source.items())
        copy.erase(1)
        self.assertIn(1, source)

    def test_copy_keeps_source_ordering_and_strategy(self):
        source = self.make([(1, 1), (2, 2), (3, 3)], less=operator.gt)
        copy = OrderedMap(source)
        self.assertEqual(list(copy), [3, 2, 1])
        self.assertIs(copy.strategy, source.strategy)
        copy.insert(4, 4)
        self.assertEqual(copy.min_key(), 4)
        copy.validate()

    def test_copy_with_explicit_ordering_overrides_source(self):
        source = self.make([(1, 1), (2, 2), (3, 3)], less=operator.gt)
        copy = OrderedMap(source, less=operator.lt, strategy="avl")
        self.assertEqual(list(copy), [1, 2, 3])
        self.assertIs(copy.strategy, AVL)

    def test_custom_comparator_descending(self):
        tree = self.make([(k, k) for k in [3, 1, 4, 5, 9, 2, 6]], less=lambda a, b: a > b)
        self.assertEqual(list(tree), [9, 6, 5, 4, 3, 2, 1])
        self.assertEqual(tree.min_key(), 9)
        tree.validate()

    def test_custom_comparator_equivalent_keys(self):
        tree = self.make(less=lambda a, b: a.lower() < b.lower())
        tree.insert("Apple", 1)
        pos, inserted = tree.insert("apple", 2)
        self.assertFalse(inserted)
        self.assertEqual(pos.item, ("Apple", 1))
        self.assertIn("APPLE", tree)

    def test_views_and_reversed(self):
        tree = self.make([(2, "b"), (3, "c"), (1, "a")])
        self.assertEqual(tree.keys(), [1, 2, 3])
        self.assertEqual(tree.values(), ["a", "b", "c"])
        self.assertEqual(list(reversed(tree)), [3, 2, 1])
        self.assertEqual(tree.max_key(), 3)
        self.assertEqual(repr(tree), "OrderedMap({1: 'a', 2: 'b', 3: 'c'})")

    def test_validate_detects_broken_parent_link(self):
        tree = self.make((k, k) for k in range(10))
        tree._root.left.parent = None
        with self.assertRaises(AssertionError):
            tree.validate()

    def test_validate_detects_size_mismatch(self):
        tree = self.make((k, k) for k in range(10))
        tree._size += 1
        with self.assertRaises(AssertionError):
            tree.validate()

    # ------------------------------------------------------------------
    #  Randomised mixed workload
    # ------------------------------------------------------------------
    def test_random_workload_keeps_invariants(self):
        rng = random.Random(99)
        tree = self.make()
        reference = {}
        for _ in range(3_000):
            k = rng.randrange(150)
            if rng.random() < 0.5:
                tree.insert(k, k)
                reference.setdefault(k, k)
            else:
                tree.erase(k)
                reference.pop(k, None)
            tree.validate()
            self.assertEqual(tree.size(), len(reference))
        self.assertEqual(list(tree), sorted(reference))


class TestAvlOrderedMap(_OrderedMapContract, unittest.TestCase):
    strategy = "avl"


class TestRedBlackOrderedMap(_OrderedMapContract, unittest.TestCase):
    strategy = "red-black"


class TestStrategySelection(unittest.TestCase):
    def test_names_resolve_to_strategies(self):
        self.assertIs(resolve_strategy("avl"), AVL)
        self.assertIs(resolve_strategy("red-black"), RED_BLACK)
        self.assertIs(resolve_strategy(RED_BLACK), RED_BLACK)
        self.assertEqual(sorted(STRATEGIES), ["avl", "red-black"])

    def test_default_is_avl(self):
        self.assertIs(OrderedMap().strategy, AVL)

    def test_unknown_name_raises(self):
        with self.assertRaises(ValueError):
            OrderedMap(strategy="splay")


if __name__ == "__main__":
    unittest.main(verbosity=2)
