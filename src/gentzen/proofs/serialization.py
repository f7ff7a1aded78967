"""JSON serialization for derivation trees."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from gentzen.core.serialization import CoreJSONEncoder, decode_core_object
from gentzen.rules.base import ProofRule
from .tree import Complete, Open, ProofTree


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for derivation trees."""

    def default(self, obj):
        if isinstance(obj, Open):
            return {
                "_type": "Open",
                "claim": obj.claim
            }

        elif isinstance(obj, Complete):
            return {
                "_type": "Complete",
                "claim": obj.claim,
                "rule": obj.rule.value,
                "subproofs": list(obj.subproofs)
            }

        return super().default(obj)


def decode_proof_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to a tree node or core object."""
    obj_type = dct.get("_type")

    if obj_type == "Open":
        return Open(dct["claim"])

    elif obj_type == "Complete":
        return Complete(
            dct["claim"],
            dct["subproofs"],
            ProofRule.from_name(dct["rule"])
        )

    return decode_core_object(dct)


class ProofJSONDecoder(json.JSONDecoder):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, object_hook=decode_proof_object, **kwargs)


def tree_to_json(tree: ProofTree, indent: int = 2) -> str:
    """Convert a derivation tree to JSON string."""
    return json.dumps(tree, cls=ProofJSONEncoder, indent=indent)


def tree_from_json(json_str: str) -> ProofTree:
    """Create a derivation tree from JSON string."""
    return json.loads(json_str, cls=ProofJSONDecoder)


def save_tree(tree: ProofTree, file_path: Union[str, Path]) -> None:
    """Save a derivation tree to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w') as f:
        json.dump(tree, f, cls=ProofJSONEncoder, indent=2)


def load_tree(file_path: Union[str, Path]) -> ProofTree:
    """Load a derivation tree from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r') as f:
        return json.load(f, cls=ProofJSONDecoder)
