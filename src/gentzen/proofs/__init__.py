"""
Derivation trees and their bookkeeping.
"""

from .tree import (
    Open, Complete, ProofTree,
    claim_of, iter_nodes, open_leaves, is_closed,
    depth, node_count, rules_used
)
from .verification import verify, is_sound
from .countermodel import evaluate, holds, countermodel
from .serialization import (
    ProofJSONEncoder, ProofJSONDecoder,
    tree_to_json, tree_from_json,
    save_tree, load_tree
)

__all__ = [
    'Open', 'Complete', 'ProofTree',
    'claim_of', 'iter_nodes', 'open_leaves', 'is_closed',
    'depth', 'node_count', 'rules_used',
    'verify', 'is_sound',
    'evaluate', 'holds', 'countermodel',
    'ProofJSONEncoder', 'ProofJSONDecoder',
    'tree_to_json', 'tree_from_json',
    'save_tree', 'load_tree'
]
