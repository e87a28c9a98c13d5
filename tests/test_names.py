import json
import random

import pytest
from enswordle.datasets import CuratedName, NameProvider, load_curated_names

NAMES = [
    CuratedName("vitalik", "easy", "individual", has_avatar=True),
    CuratedName("brantly", "medium", "individual", has_avatar=True),
    CuratedName("uniswap", "easy", "project", has_avatar=True),
    CuratedName("wallet", "easy", "generic", has_avatar=False, fallback_icon="wallet"),
]


def _provider(seed=7):
    return NameProvider(NAMES, rng=random.Random(seed))


def test_load_bundled_names():
    names = load_curated_names()
    assert names and all(isinstance(n, CuratedName) for n in names)
    assert any(n.name == "vitalik" for n in names)


def test_load_maps_camel_case_fields(tmp_path):
    p = tmp_path / "names.json"
    p.write_text(json.dumps([{"name": "ens", "difficulty": "easy", "category": "project",
                              "hasAvatar": True, "addedDate": "2024-01-01"}]), encoding="utf-8")
    (n,) = load_curated_names(p)
    assert n == CuratedName("ens", "easy", "project", has_avatar=True, added_date="2024-01-01")


def test_load_rejects_non_list(tmp_path):
    p = tmp_path / "names.json"
    p.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_curated_names(p)


def test_empty_provider_is_an_error():
    with pytest.raises(ValueError):
        NameProvider([])


def test_provider_is_callable_target_source():
    p = _provider()
    assert p() in {n.name for n in NAMES}


def test_random_by_difficulty_and_category():
    p = _provider()
    for _ in range(20):
        assert p.random_name_by_difficulty("medium").name == "brantly"
        assert p.random_name_by_category("project").name == "uniswap"


def test_empty_filters_fall_back_to_any_name(caplog):
    p = _provider()
    assert p.random_name_by_difficulty("hard") in NAMES
    assert p.random_name_by_category("celebrity") in NAMES
    assert "falling back" in caplog.text


def test_metadata_lookup_is_case_insensitive():
    p = _provider()
    assert p.is_curated("Vitalik")
    assert not p.is_curated("satoshi")
    assert p.metadata("UNISWAP").category == "project"
    assert p.metadata("satoshi") is None


def test_fallback_name():
    assert _provider().fallback_name().name == "vitalik"
    only_generic = NameProvider([CuratedName("wallet", "easy", "generic")])
    assert only_generic.fallback_name().name == "wallet"


def test_summary():
    s = _provider().summary()
    assert s["total"] == 4
    assert s["by_difficulty"] == {"easy": 3, "medium": 1, "hard": 0}
    assert s["by_category"] == {"individual": 2, "project": 1, "generic": 1}
    assert s["with_avatars"] == 3
    assert s["average_length"] == 7
