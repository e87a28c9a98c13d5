from .names import CuratedName, NameProvider, load_curated_names
from .validator import validate_curated_names, pretty_summary
from .io import DEFAULT_NAMES_PATH, read_json, write_json

__all__ = [
    "CuratedName", "NameProvider", "load_curated_names",
    "validate_curated_names", "pretty_summary",
    "DEFAULT_NAMES_PATH", "read_json", "write_json",
]
