"""Core propositional data structures."""

from .logic import (
    Formula, Bottom, Literal, Not, And, Or, Implication,
    Claim, precedence
)
from .serialization import (
    CoreJSONEncoder, decode_core_object,
    claim_to_json, claim_from_json,
    formula_to_json, formula_from_json,
    save_claim, load_claim
)

__all__ = [
    # Logic
    'Formula', 'Bottom', 'Literal', 'Not', 'And', 'Or', 'Implication',
    'Claim', 'precedence',
    # Serialization
    'CoreJSONEncoder', 'decode_core_object',
    'claim_to_json', 'claim_from_json',
    'formula_to_json', 'formula_from_json',
    'save_claim', 'load_claim'
]
