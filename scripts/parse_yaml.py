"""Parse a YAML document and print it, or one node of it, as JSON."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any, List, Sequence

import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from liteyaml.observability import init_logging
from liteyaml.yamlparser import LiteYamlError, PathStep, YamlDocument, tokenize


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).expanduser().read_text(encoding="utf-8")


def _path_steps(raw: Sequence[str]) -> List[PathStep]:
    return [int(step) if step.isdigit() else step for step in raw]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("file", help="YAML file to parse, or - for stdin")
    parser.add_argument(
        "--get",
        nargs="*",
        default=[],
        metavar="STEP",
        help="Keys and indexes selecting the node to print",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the normalized token stream instead of the value",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    args = parser.parse_args(argv)
    init_logging(os.getenv("LOG_LEVEL", "WARNING"), stream=sys.stderr)

    try:
        text = _read_source(args.file)
        output: Any
        if args.tokens:
            output = [{"kind": token.kind.name, "text": token.source} for token in tokenize(text)]
        else:
            output = YamlDocument(text).get(*_path_steps(args.get))
    except (LiteYamlError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
