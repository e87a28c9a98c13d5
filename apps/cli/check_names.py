# apps/cli/check_names.py
"""
Validate the curated names list and, optionally, check avatars online.

This script:
  1) Validates the list (format, difficulty/category, duplicates) and prints
     a one-line summary.
  2) With --avatars, resolves every valid name's avatar (progress bar) and
     reports names whose hasAvatar flag disagrees with reality.
  3) With --out, writes the full report as JSON.

Usage:
    python -m apps.cli.check_names
    python -m apps.cli.check_names --avatars --out reports/names_check.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from enswordle.datasets import (
    DEFAULT_NAMES_PATH, load_curated_names, pretty_summary, validate_curated_names, write_json,
)


def main(argv=None):
    ap = argparse.ArgumentParser(description="ENS-Wordle: curated names check")
    ap.add_argument("--names", default=str(DEFAULT_NAMES_PATH), help="curated names JSON")
    ap.add_argument("--avatars", action="store_true", help="resolve avatars online")
    ap.add_argument("--timeout", type=float, default=3.0, help="per-request timeout (s)")
    ap.add_argument("--delay", type=float, default=0.1, help="pause between requests (s)")
    ap.add_argument("--out", help="write the JSON report here")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 1) Static validation
    rep = validate_curated_names(args.names)
    print(pretty_summary(rep))
    for msg in rep["errors"]:
        print(f"  error: {msg}")
    for msg in rep["warnings"]:
        print(f"  warning: {msg}")

    # 2) Optional live avatar check
    if args.avatars and rep["exists"]:
        from enswordle.avatar.metadata import MetadataAvatarResolver, batch_resolve

        names = load_curated_names(args.names)
        resolver = MetadataAvatarResolver(timeout=args.timeout)
        found = batch_resolve([n.name for n in names], resolver, delay=args.delay)
        mismatched = [n.name for n in names if (found.get(n.name) is not None) != n.has_avatar]
        rep["avatars"] = found
        rep["avatar_flag_mismatches"] = mismatched
        print(f"avatars found: {sum(v is not None for v in found.values())}/{len(found)}"
              f" | hasAvatar mismatches: {mismatched or 'none'}")

    # 3) Report
    if args.out:
        print(f"Wrote: {write_json(rep, args.out)}")

    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
