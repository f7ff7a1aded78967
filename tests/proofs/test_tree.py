"""Tests for derivation trees and tree queries."""

import unittest
from dataclasses import FrozenInstanceError

from gentzen.core.logic import Literal, And, Claim
from gentzen.proofs import (
    Open, Complete,
    claim_of, iter_nodes, open_leaves, is_closed,
    depth, node_count, rules_used
)
from gentzen.rules import ProofRule


p, q = Literal("p"), Literal("q")


class TestTreeNodes(unittest.TestCase):
    """Test the two node shapes."""

    def setUp(self):
        self.root = Claim([And(p, q)], [p])
        self.child = Claim([p, q], [p])

    def test_open(self):
        tree = Open(self.root)
        self.assertEqual(tree.claim, self.root)
        self.assertEqual(claim_of(tree), self.root)

    def test_complete_subproofs_are_tuples(self):
        tree = Complete(self.root, [Open(self.child)], ProofRule.LAnd)
        self.assertEqual(tree.subproofs, (Open(self.child),))
        self.assertEqual(claim_of(tree), self.root)

    def test_equality(self):
        self.assertEqual(Open(self.root), Open(Claim([And(p, q)], [p])))
        self.assertNotEqual(Open(self.root), Complete(self.root, (), ProofRule.Axiom))

    def test_immutable(self):
        tree = Open(self.root)
        with self.assertRaises(FrozenInstanceError):
            tree.claim = self.child

    def test_claim_of_rejects_other_values(self):
        with self.assertRaises(TypeError):
            claim_of(self.root)


class TestTreeQueries(unittest.TestCase):
    """Test traversal helpers on a hand-built tree."""

    def setUp(self):
        #        root (RAnd)
        #       /          \
        #   left (Axiom)   right (open)
        self.left = Complete(Claim([p], [p]), (), ProofRule.Axiom)
        self.right = Open(Claim([p], [q]))
        self.root = Complete(Claim([p], [And(p, q)]), (self.left, self.right), ProofRule.RAnd)

    def test_iter_nodes_preorder(self):
        self.assertEqual(list(iter_nodes(self.root)), [self.root, self.left, self.right])

    def test_open_leaves(self):
        self.assertEqual(open_leaves(self.root), [Claim([p], [q])])
        self.assertEqual(open_leaves(self.left), [])

    def test_is_closed(self):
        self.assertFalse(is_closed(self.root))
        self.assertTrue(is_closed(self.left))
        self.assertFalse(is_closed(self.right))

    def test_depth(self):
        self.assertEqual(depth(self.root), 1)
        self.assertEqual(depth(self.left), 0)
        self.assertEqual(depth(self.right), 0)

    def test_node_count(self):
        self.assertEqual(node_count(self.root), 3)

    def test_rules_used(self):
        self.assertEqual(rules_used(self.root), [ProofRule.RAnd, ProofRule.Axiom])


if __name__ == '__main__':
    unittest.main()
