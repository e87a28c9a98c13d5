"""
Curated name list validator.

What this module does:
- Validate the curated ENS name list (a JSON array of name records).
- Enforce playability rules: lowercase a–z only, at least 3 letters, since
  the game only accepts letter guesses.
- Check difficulty/category values and flag duplicate names.
- Compute the SHA-256 of the raw file for reports.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from enswordle.datasets import validate_curated_names, pretty_summary
    rep = validate_curated_names("enswordle/datasets/data/curated_names.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from .names import CATEGORIES, DIFFICULTIES

_PLAYABLE = re.compile(r"[a-z]+")


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Validation result for one curated list file."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    count: int             # number of records read
    valid_count: int       # records that pass every rule
    unique_count: int      # distinct names among valid records
    with_avatars: int      # valid records flagged hasAvatar
    passed: bool
    errors: List[str]      # problems that make the list unusable as-is
    warnings: List[str]    # worth a look, not fatal


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_record(idx: int, rec, min_length: int) -> Tuple[bool, List[str], List[str]]:
    """
    Check a single record.

    Returns:
      (ok, errors, warnings)
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not isinstance(rec, dict) or not isinstance(rec.get("name"), str):
        return False, [f"record {idx}: missing or non-string name"], warnings

    name = rec["name"]
    if not _PLAYABLE.fullmatch(name):
        errors.append(f"record {idx}: invalid name {name!r} (lowercase a-z only)")
    elif len(name) < min_length:
        errors.append(f"record {idx}: name {name!r} shorter than {min_length}")

    if rec.get("difficulty") not in DIFFICULTIES:
        errors.append(f"record {idx}: invalid difficulty {rec.get('difficulty')!r}")
    if rec.get("category") not in CATEGORIES:
        errors.append(f"record {idx}: invalid category {rec.get('category')!r}")

    if not rec.get("hasAvatar") and not rec.get("fallbackIcon"):
        warnings.append(f"{name}: no avatar and no fallbackIcon")

    return not errors, errors, warnings


# -----------------------------
# Public API
# -----------------------------

def validate_curated_names(path: str, min_length: int = 3) -> Dict:
    """
    Validate a curated names file.

    Parameters
    ----------
    path : str
        Path to the JSON array of name records.
    min_length : int
        Shortest name considered playable.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict: the file parses, is non-empty, has no invalid
        records and no duplicates.
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path, False, "", 0, 0, 0, 0, False,
                               [f"names file not found: {path}"], [])
        return asdict(rep)

    errors: List[str] = []
    warnings: List[str] = []

    try:
        records = json.loads(p.read_text(encoding="utf-8"))
    except ValueError as e:
        records = None
        errors.append(f"names file is not valid JSON: {e}")

    if records is not None and not isinstance(records, list):
        errors.append("names file must contain a JSON array")
        records = None
    records = records or []

    valid_names: List[str] = []
    with_avatars = 0
    for idx, rec in enumerate(records):
        ok, errs, warns = _check_record(idx, rec, min_length)
        errors += errs
        warnings += warns
        if ok:
            valid_names.append(rec["name"])
            with_avatars += bool(rec.get("hasAvatar"))

    unique = set(valid_names)
    if len(unique) != len(valid_names):
        dupes = sorted({n for n in valid_names if valid_names.count(n) > 1})
        errors.append(f"duplicate names: {dupes[:5]}")

    if not records:
        errors.append("curated list is empty")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        count=len(records),
        valid_count=len(valid_names),
        unique_count=len(unique),
        with_avatars=with_avatars,
        passed=not errors,
        errors=errors,
        warnings=warnings,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        names=14 (valid=14, uniq=14, avatars=10, sha=abc123...) | warnings=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"names={report['count']} (valid={report['valid_count']}, "
        f"uniq={report['unique_count']}, avatars={report['with_avatars']}, sha={sha}) "
        f"| warnings={len(report['warnings'])} | {status}"
    )
