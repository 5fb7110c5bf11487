#!/usr/bin/env python
"""Run acronym parser functions against a local acronym document.

Handy for checking an Acronyms.json edit before saving it to the wiki.

Usage:
    # Resolve an acronym in the default category
    uv run python scripts/lookup.py data/messages/Acronyms.json btw

    # Property lookup with a not-found fallback
    uv run python scripts/lookup.py Acronyms.json chat btw tone "n/a"

    # Existence check
    uv run python scripts/lookup.py Acronyms.json --function acronymexists xyz "" "" no

    # Print what was loaded
    uv run python scripts/lookup.py Acronyms.json --stats
"""

import argparse
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from acronym_service.acronyms import (  # noqa: E402
    PARSER_FUNCTIONS,
    AcronymConfig,
    AcronymExtension,
    FileSource,
)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run acronym parser functions against a local JSON document"
    )
    parser.add_argument(
        "document",
        type=Path,
        help="Path to the acronym JSON document (file name must end in .json)",
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="Parser function arguments, as written between the pipes",
    )
    parser.add_argument(
        "--function",
        choices=sorted(PARSER_FUNCTIONS),
        default="acronym",
        help="Parser function to call (default: acronym)",
    )
    parser.add_argument(
        "--category",
        default="",
        help="Default category (default: all)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print counts of the loaded data",
    )

    args = parser.parse_args()

    if not args.document.is_file():
        print(f"Error: Document not found: {args.document}")
        sys.exit(1)
    if args.document.suffix != ".json":
        print(f"Error: Document name must end in .json: {args.document}")
        sys.exit(1)

    config = AcronymConfig(
        default_category=args.category.strip().lower(),
        source_name=args.document.stem,
    )
    extension = AcronymExtension(FileSource(args.document.parent), config)
    session = extension.new_session()

    if args.args:
        print(session.call(args.function, args.args[:4]))

    if args.stats or not args.args:
        session.store.update()
        print(json.dumps(session.store.stats, indent=2))


if __name__ == "__main__":
    main()
