import json

from apps.cli import check_names, play
from enswordle.config import GAME_STATE_KEY, GAME_STATS_KEY


def _names_file(tmp_path):
    p = tmp_path / "names.json"
    p.write_text(json.dumps([{"name": "ens", "difficulty": "easy", "category": "project",
                              "hasAvatar": True}]), encoding="utf-8")
    return str(p)


def _feed(monkeypatch, *lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_play_win_and_stats(tmp_path, monkeypatch, capsys):
    names = _names_file(tmp_path)
    store = str(tmp_path / "store")
    _feed(monkeypatch, "toolong", "nse", "ENS")

    assert play.main(["--names", names, "--store-dir", store]) == 0
    out = capsys.readouterr().out
    assert "Must be 3 letters" in out
    assert "YYY" in out
    assert "Solved ens.eth in 2" in out

    saved = json.loads((tmp_path / "store" / f"{GAME_STATS_KEY}.json").read_text(encoding="utf-8"))
    assert saved["games_won"] == 1 and saved["guess_distribution"] == {"2": 1}

    assert play.main(["--names", names, "--store-dir", store, "--stats"]) == 0
    assert "Played 1 | Win % 100" in capsys.readouterr().out


def test_play_without_saving_stops_on_eof(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, "abc")
    assert play.main(["--names", _names_file(tmp_path), "--no-save"]) == 0
    out = capsys.readouterr()
    assert "will not be saved" in out.err
    assert "Bye." in out.out


def test_play_with_unusable_store_does_not_claim_saving(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "blocked"
    blocker.write_text("", encoding="utf-8")
    _feed(monkeypatch, "abc")
    assert play.main(["--names", _names_file(tmp_path), "--store-dir", str(blocker)]) == 0
    out = capsys.readouterr()
    assert "will not be saved" in out.err
    assert "Bye." in out.out
    assert "Progress saved." not in out.out


def test_stats_does_not_start_a_round(tmp_path, capsys):
    store = tmp_path / "store"
    assert play.main(["--names", _names_file(tmp_path), "--store-dir", str(store), "--stats"]) == 0
    assert "Played 0 | Win % 0" in capsys.readouterr().out
    assert not (store / f"{GAME_STATE_KEY}.json").exists()


def test_check_names(tmp_path, capsys):
    report = tmp_path / "out" / "report.json"
    assert check_names.main(["--names", _names_file(tmp_path), "--out", str(report)]) == 0
    assert "| OK" in capsys.readouterr().out
    assert json.loads(report.read_text(encoding="utf-8"))["passed"] is True
