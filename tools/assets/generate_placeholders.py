#!/usr/bin/env python3
"""Write placeholder portrait assets (fonts, portraits, borders, badges)."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.portrait_core.render.placeholders import write_placeholder_assets


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate placeholder assets for the portrait service")
    parser.add_argument(
        "--out",
        type=Path,
        default=ROOT / "assets",
        help="Asset root to populate (default: <repo>/assets)",
    )
    parser.add_argument(
        "--font",
        type=Path,
        default=None,
        help="TrueType font to install as the portrait font (default: Pillow's bundled font)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace files that already exist",
    )
    args = parser.parse_args()

    try:
        written = write_placeholder_assets(args.out, font_source=args.font, overwrite=args.overwrite)
    except (OSError, RuntimeError) as exc:
        print(f"ERROR: {exc}")
        return 1

    for path in written:
        print(f"Wrote {path}")
    print(f"{len(written)} file(s) written under {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
