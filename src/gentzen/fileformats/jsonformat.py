"""JSON claim format handler."""

import json
from pathlib import Path

from gentzen.core.logic import Formula, Literal, Claim
from gentzen.core.serialization import claim_to_json, decode_core_object
from .base import FileFormat


def _check_formula(formula) -> None:
    if not isinstance(formula, Formula):
        raise ValueError(f"Expected a formula, got {formula!r}")
    if isinstance(formula, Literal) and not isinstance(formula.name, str):
        raise ValueError(f"Literal name must be a string, got {formula.name!r}")
    for operand in formula.operands:
        _check_formula(operand)


class JSONFormat(FileFormat):
    """Handler for claims stored with the core JSON encoding."""

    def parse_file(self, file_path: Path) -> Claim:
        with open(file_path, 'r') as f:
            return self.parse_string(f.read())

    def parse_string(self, content: str) -> Claim:
        try:
            claim = json.loads(content, object_hook=decode_core_object)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed claim: missing or invalid field {e}") from e
        if not isinstance(claim, Claim):
            raise ValueError(f"Expected a Claim, got {type(claim).__name__}")
        for formula in claim.formulas:
            _check_formula(formula)
        return claim

    def format_claim(self, claim: Claim, indent: int = 2) -> str:
        return claim_to_json(claim, indent=indent)

    @property
    def name(self) -> str:
        return "json"

    @property
    def extensions(self) -> list[str]:
        return ['.json']
