from __future__ import annotations

import argparse
from pathlib import Path

from ..logging import configure_logging
from .loader import DEFAULT_SPEC_DIR, load_catalog
from .render import DEFAULT_OUTPUT_DIR, GenerationError, render_package, stale_files, write_package


def main() -> int:
    parser = argparse.ArgumentParser(prog="python -m fb_ads_mcp.codegen")
    parser.add_argument("--specs", type=Path, default=DEFAULT_SPEC_DIR, help="Directory of API spec JSON files")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_DIR, help="Generated package directory")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit non-zero if the committed output differs from a fresh render",
    )
    args = parser.parse_args()

    configure_logging()
    catalog = load_catalog(args.specs)
    try:
        files = render_package(catalog)
    except GenerationError as exc:
        raise SystemExit(f"[codegen] {exc}") from exc

    if args.check:
        stale = stale_files(files, args.output)
        if stale:
            raise SystemExit("[codegen] stale generated files: " + ", ".join(stale))
        return 0

    write_package(files, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
