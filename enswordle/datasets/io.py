from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_NAMES_PATH = Path(__file__).parent / "data" / "curated_names.json"


def read_json(p: Path | str) -> Any:
    """
    Parse a UTF-8 JSON file.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return json.loads(p.read_text(encoding="utf-8"))


def write_json(data: Any, p: Path | str) -> str:
    """
    Write `data` as indented UTF-8 JSON, creating parent directories.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return str(p)
