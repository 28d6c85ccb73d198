"""Command-line entry point: rewrite a Glimmer AST dumped as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from angle_brackets.formats.json import from_json, to_json
from angle_brackets.syntax import Program
from angle_brackets.transform import transform

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="angle-brackets",
        description=(
            "Rewrite angle-bracket component invocations in a Glimmer AST "
            "into curly invocations"
        ),
    )
    p.add_argument(
        "tree",
        help="template AST as JSON (Program root); - reads stdin",
    )
    p.add_argument(
        "-s",
        "--source",
        type=Path,
        help="original template text, to recover tag case and self-closing tags",
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        help="write the rewritten AST here instead of stdout",
    )
    p.add_argument(
        "--compact",
        action="store_true",
        help="emit JSON without indentation",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each classification and replacement",
    )
    return p


def _read_tree(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    return Path(arg).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        template = from_json(_read_tree(args.tree))
        if not isinstance(template, Program):
            msg = f"Expected a Program root, got {template.node_type}"
            raise ValueError(msg)
        contents = args.source.read_text(encoding="utf-8") if args.source else None
        output = to_json(
            transform(template, contents),
            indent=None if args.compact else 2,
        )
    except (OSError, json.JSONDecodeError, KeyError, ValueError) as e:
        sys.stderr.write(f"angle-brackets: error: {e}\n")
        return 1

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output + "\n")
    return 0
