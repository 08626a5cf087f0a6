"""Command-line entry point: ``molform FORMULA``.

Parse errors go to stderr with exit status 1, not to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from molform.exceptions import FormulaError
from molform.parser import parse_molecule
from molform.writer import to_formula

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="molform",
        description="Count the atoms of each element in a molecular formula.",
    )
    parser.add_argument("formula", help='formula to parse, e.g. "K4[ON(SO3)2]2"')
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--format",
        choices=("pairs", "formula", "json"),
        default="pairs",
        help="output style (default: pairs)",
    )
    output.add_argument(
        "--hill",
        action="store_true",
        help="print the formula in Hill order",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        molecule = parse_molecule(args.formula)
    except FormulaError as e:
        logger.debug("failed to parse %r", args.formula, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.hill:
        print(to_formula(molecule, order="hill"))
    elif args.format == "formula":
        print(to_formula(molecule))
    elif args.format == "json":
        print(json.dumps(molecule.as_dict()))
    else:
        print(f"Atoms: {molecule.to_pairs()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
