import json
from pathlib import Path

from enswordle.datasets import DEFAULT_NAMES_PATH, pretty_summary, validate_curated_names


def _write(p: Path, records):
    p.write_text(json.dumps(records), encoding="utf-8")


def _rec(name, **kw):
    d = {"name": name, "difficulty": "easy", "category": "individual", "hasAvatar": True}
    d.update(kw)
    return d


def test_bundled_list_passes():
    rep = validate_curated_names(str(DEFAULT_NAMES_PATH))
    assert rep["passed"] is True, rep["errors"]
    assert rep["count"] == rep["valid_count"] == rep["unique_count"] > 0


def test_validate_curated_names_happy_path(tmp_path: Path):
    p = tmp_path / "names.json"
    _write(p, [_rec("vitalik"), _rec("nick"), _rec("wallet", hasAvatar=False, fallbackIcon="w")])

    rep = validate_curated_names(str(p))
    assert rep["passed"] is True
    assert rep["with_avatars"] == 2
    assert rep["warnings"] == []
    s = pretty_summary(rep)
    assert "names=3" in s and "OK" in s


def test_validate_curated_names_flags_errors(tmp_path: Path):
    # digits, hyphen, too short, bad difficulty should all be flagged
    p = tmp_path / "names.json"
    _write(p, [_rec("vitalik"), _rec("abc123"), _rec("my-name"), _rec("ab"),
               _rec("gitcoin", difficulty="extreme"), {"difficulty": "easy"}])

    rep = validate_curated_names(str(p))
    assert rep["passed"] is False
    assert rep["valid_count"] == 1
    assert any("invalid name" in msg for msg in rep["errors"])
    assert any("shorter than 3" in msg for msg in rep["errors"])
    assert any("difficulty" in msg for msg in rep["errors"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_curated_names_duplicates_and_warnings(tmp_path: Path):
    p = tmp_path / "names.json"
    _write(p, [_rec("vitalik"), _rec("vitalik"), _rec("wallet", hasAvatar=False)])

    rep = validate_curated_names(str(p))
    assert rep["passed"] is False
    assert any("duplicate" in msg for msg in rep["errors"])
    assert any("wallet" in msg for msg in rep["warnings"])


def test_validate_curated_names_missing_or_malformed(tmp_path: Path):
    rep = validate_curated_names(str(tmp_path / "nope.json"))
    assert rep["exists"] is False and rep["passed"] is False

    p = tmp_path / "broken.json"
    p.write_text("{oops", encoding="utf-8")
    rep = validate_curated_names(str(p))
    assert rep["passed"] is False
    assert any("not valid JSON" in msg for msg in rep["errors"])

    _write(p, [])
    assert "curated list is empty" in validate_curated_names(str(p))["errors"]
