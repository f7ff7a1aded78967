"""JSON serialization for formulas and claims."""

import json
from pathlib import Path
from typing import Dict, Any, Union

from .logic import (
    Formula, Bottom, Literal, Not, And, Or, Implication, Claim
)


_BINARY = {
    "And": And,
    "Or": Or,
    "Implication": Implication,
}


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for formulas and claims."""

    def default(self, obj):
        if isinstance(obj, Bottom):
            return {"_type": "Bottom"}

        elif isinstance(obj, Literal):
            return {
                "_type": "Literal",
                "name": obj.name
            }

        elif isinstance(obj, Not):
            return {
                "_type": "Not",
                "operand": obj.operand
            }

        elif isinstance(obj, (And, Or, Implication)):
            return {
                "_type": type(obj).__name__,
                "lhs": obj.lhs,
                "rhs": obj.rhs
            }

        elif isinstance(obj, Claim):
            return {
                "_type": "Claim",
                "lhs": list(obj.lhs),
                "rhs": list(obj.rhs)
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to a formula or claim."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Bottom":
        return Bottom()

    elif obj_type == "Literal":
        return Literal(dct["name"])

    elif obj_type == "Not":
        return Not(dct["operand"])

    elif obj_type in _BINARY:
        return _BINARY[obj_type](dct["lhs"], dct["rhs"])

    elif obj_type == "Claim":
        return Claim(dct["lhs"], dct["rhs"])

    return dct


# Convenience functions

def claim_to_json(claim: Claim, indent: int = 2) -> str:
    """Convert a Claim to JSON string."""
    return json.dumps(claim, cls=CoreJSONEncoder, indent=indent)


def claim_from_json(json_str: str) -> Claim:
    """Create a Claim from JSON string."""
    return json.loads(json_str, object_hook=decode_core_object)


def formula_to_json(formula: Formula, indent: int = 2) -> str:
    return json.dumps(formula, cls=CoreJSONEncoder, indent=indent)


def formula_from_json(json_str: str) -> Formula:
    return json.loads(json_str, object_hook=decode_core_object)


def save_claim(claim: Claim, file_path: Union[str, Path]) -> None:
    """Save a Claim to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w') as f:
        json.dump(claim, f, cls=CoreJSONEncoder, indent=2)


def load_claim(file_path: Union[str, Path]) -> Claim:
    """Load a Claim from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r') as f:
        return json.load(f, object_hook=decode_core_object)
