#!/usr/bin/env python3
"""
Prove every claim file in a directory.

USAGE:
    gentzen-batch problems/
    gentzen-batch problems/ --pattern "*.json"
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from gentzen.fileformats import get_format_handler
from gentzen.proofs import Open, is_closed, node_count

from .common import load_settings, strategy_from_config

logger = logging.getLogger(__name__)


def prove_directory(directory: Path, pattern: str, strategy) -> list:
    """Prove all matching files; returns (name, status, nodes) rows."""
    rows = []
    counts = {'proved': 0, 'open': 0, 'error': 0}
    for path in (pbar := tqdm(sorted(directory.glob(pattern)), desc="Proving claims")):
        try:
            claim = get_format_handler(file_path=path).parse_file(path)
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            status, nodes = "error", 0
        else:
            tree = strategy.search(Open(claim))
            status = "proved" if is_closed(tree) else "open"
            nodes = node_count(tree)
        counts[status] += 1
        rows.append((path.name, status, nodes))
        pbar.set_postfix({
            'Claim': path.name,
            'Proved': counts['proved'],
            'Open': counts['open'],
            'Errors': counts['error'],
        })
    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Prove every claim file in a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("directory", type=Path, help="Directory containing claim files")
    parser.add_argument("--pattern", default="*.seq", help="Glob for claim files (default: *.seq)")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Show search details")

    args = parser.parse_args(argv)

    if not args.directory.is_dir():
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 1

    try:
        config = load_settings(args.config, verbose=args.verbose)
        strategy = strategy_from_config(config)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    rows = prove_directory(args.directory, args.pattern, strategy)
    if not rows:
        print(f"No files matching {args.pattern} in {args.directory}")
        return 0

    width = max(len(name) for name, _, _ in rows)
    for name, status, nodes in rows:
        print(f"  {name:<{width}}  {status:<6}  {nodes:>5} nodes")
    proved = sum(1 for _, status, _ in rows if status == "proved")
    print(f"{proved}/{len(rows)} proved")
    return 0


if __name__ == "__main__":
    sys.exit(main())
