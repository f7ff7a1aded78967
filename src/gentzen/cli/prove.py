#!/usr/bin/env python3
"""
Prove a single sequent.

USAGE:
    gentzen claim.seq
    gentzen claim.seq --format text
    gentzen claim.seq --json derivation.json
    gentzen claim.seq --standalone > proof.tex
"""

import argparse
import logging
import sys
from pathlib import Path

from gentzen.fileformats import SequentSyntaxError, get_format_handler
from gentzen.proofs import Open, countermodel, is_closed, open_leaves, save_tree
from gentzen.render import RENDERERS, claim_latex, latex_document, render

from .common import load_settings, strategy_from_config

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Prove a propositional sequent and print its derivation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("claim", type=Path, nargs="?", help="File containing exactly one claim")
    parser.add_argument("--format", choices=["latex", "text"], help="Output format (default from config: latex)")
    parser.add_argument("--standalone", action="store_true", help="Wrap LaTeX output in a complete document")
    parser.add_argument("--json", dest="json_output", type=Path, help="Export the derivation to a JSON file")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Show the parsed claim and search details")

    args = parser.parse_args(argv)

    if args.claim is None:
        print("Error: supply a claim file as argument", file=sys.stderr)
        return 1

    try:
        config = load_settings(args.config, verbose=args.verbose)
        strategy = strategy_from_config(config)
        output_format = args.format or config.get("render.format", "latex")
        if output_format not in RENDERERS:
            raise ValueError(f"Unknown output format: {output_format}")
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    handler = get_format_handler(file_path=args.claim)
    try:
        claim = handler.parse_file(args.claim)
    except OSError as e:
        print(f"Error: Could not read file: {e}", file=sys.stderr)
        return 1
    except SequentSyntaxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid claim: {e}", file=sys.stderr)
        return 1

    logger.info("Parsed claim: %s", claim)
    if args.verbose:
        print(f"Claim:\n{claim}")
        print(f"Latex:\n{claim_latex(claim)}")

    tree = strategy.search(Open(claim))

    if output_format == "latex" and args.standalone:
        print(latex_document(tree), end="")
    else:
        print(render(tree, output_format))

    if args.json_output:
        save_tree(tree, args.json_output)
        logger.info("Derivation written to %s", args.json_output)

    if is_closed(tree):
        print("proved", file=sys.stderr)
    else:
        falsified = strategy.uses_every_rule and ", ".join(
            f"{name}={str(value).lower()}" for name, value in countermodel(tree).items()
        )
        print(f"open ({len(open_leaves(tree))} open leaves)", file=sys.stderr)
        if falsified:
            print(f"countermodel: {falsified}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
