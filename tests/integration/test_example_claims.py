"""Prove the claims shipped in examples/claims."""

from pathlib import Path

import pytest

from gentzen import prove, read_file
from gentzen.proofs import is_closed, is_sound, countermodel, holds


CLAIMS_DIR = Path(__file__).resolve().parents[2] / "examples" / "claims"

EXPECTED = {
    "axiom.seq": True,
    "excluded_middle.seq": True,
    "and_commutes.seq": True,
    "chain.seq": True,
    "ex_falso.seq": True,
    "unprovable.seq": False,
    "needs_contraction.seq": False,
}


@pytest.mark.parametrize("name,provable", sorted(EXPECTED.items()))
def test_example_claim(name, provable):
    claim = read_file(CLAIMS_DIR / name)
    tree = prove(claim)
    assert is_closed(tree) == provable
    assert is_sound(tree)
    if not provable:
        assert not holds(claim, countermodel(tree))


def test_every_example_listed():
    assert {path.name for path in CLAIMS_DIR.glob("*.seq")} == set(EXPECTED)
