"""Render a state document from the command line.

Usage
-----
::

    python scripts/render_state.py state.json
    python scripts/render_state.py state.json --override state_override.json
    python scripts/render_state.py state.json --flat

Options::

    --override PATH    Apply this override document before rendering
    --no-aggregate     Render levels as stored, without rolling them up
    --flat             Print the flat JSON export instead of text
    --verbose / -v     Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from jsonstate.exceptions import OverrideLoadError
from jsonstate.models import StateNode
from jsonstate.overrides import load_override
from jsonstate.render import flatten_to_dicts

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a JSON state tree.")
    parser.add_argument("state", help="State document (JSON)")
    parser.add_argument("--override", help="Override document to apply before rendering")
    parser.add_argument("--no-aggregate", action="store_true", help="Do not roll up container levels")
    parser.add_argument("--flat", action="store_true", help="Print the flat JSON export")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _load_state(path: Path) -> StateNode:
    return StateNode.from_json(path.read_text(encoding="utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        root = _load_state(Path(args.state))
        if args.override:
            # an explicitly requested override must exist and be valid
            if not Path(args.override).exists():
                raise OverrideLoadError(f"Override document not found: {args.override}", path=args.override)
            root.apply(load_override(args.override, strict=True))
    except (OSError, UnicodeDecodeError, ValidationError, OverrideLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if not args.no_aggregate:
        root.aggregate_levels()

    _logger.debug("Rendering state tree with %d node(s)", len(root.flatten()))

    if args.flat:
        print(json.dumps(flatten_to_dicts(root), indent=2))
    else:
        print(root.render(), end="")
    return EXIT_OK
