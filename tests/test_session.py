import itertools
import json

import pytest
from enswordle.config import GAME_STATE_KEY, GameConfig
from enswordle.errors import GameAlreadyOver, WrongLength
from enswordle.game import GameStatus, apply_guess, start_round
from enswordle.session import GameSession
from enswordle.storage import DisabledStore, JsonFileStore, MemoryStore, PersistenceGateway


def _provider(*names):
    it = itertools.cycle(names)
    return lambda: next(it)


def _clock():
    ticks = itertools.count(1000)
    return lambda: float(next(ticks))


def _session(store=None, names=("hello",), **kw):
    gw = PersistenceGateway(store if store is not None else MemoryStore())
    return GameSession(gw, _provider(*names), clock=_clock(), **kw)


class FakeResolver:
    def __init__(self, url=None, fail=False):
        self.url, self.fail, self.calls = url, fail, 0

    def resolve_avatar(self, name):
        self.calls += 1
        if self.fail:
            raise RuntimeError("boom")
        return self.url and self.url.format(name=name)


def test_new_session_starts_and_saves_round():
    store = MemoryStore()
    s = _session(store)
    assert s.state.target_word == "hello"
    assert s.state.status is GameStatus.PLAYING
    assert GAME_STATE_KEY in store.data
    assert s.statistics.games_played == 0


def test_win_records_statistics_once():
    s = _session()
    s.make_guess("holly")
    state = s.make_guess("hello")
    assert state.status is GameStatus.WON
    assert s.statistics.games_won == 1
    assert dict(s.statistics.guess_distribution) == {2: 1}
    with pytest.raises(GameAlreadyOver):
        s.make_guess("hello")
    assert s.statistics.games_played == 1


def test_loss_records_statistics():
    s = _session(config=GameConfig(max_guesses=2))
    s.make_guess("audio")
    s.make_guess("pinky")
    assert s.state.status is GameStatus.LOST
    assert s.statistics.games_played == 1 and s.statistics.current_streak == 0


def test_rejected_guess_leaves_state_unchanged():
    s = _session()
    before = s.state
    with pytest.raises(WrongLength):
        s.make_guess("hi")
    assert s.state is before


def test_resume_saved_round_and_statistics():
    store = MemoryStore()
    s = _session(store)
    s.make_guess("holly")
    resumed = _session(store, names=("other",))
    assert resumed.state == s.state
    assert resumed.state.guess_index == 1


def test_finished_round_is_not_resumed():
    store = MemoryStore()
    s = _session(store)
    s.make_guess("hello")
    nxt = _session(store, names=("world",))
    assert nxt.state.target_word == "world"
    assert nxt.state.guess_index == 0
    assert nxt.statistics.games_won == 1


def test_saved_round_beyond_guess_budget_is_not_resumed():
    store = MemoryStore()
    gw = PersistenceGateway(store)
    state = start_round("hello", now=0)
    for w in ("audio", "pinky", "crumb"):
        state = apply_guess(state, w, now=1)
    gw.save_game_state(state)
    s = GameSession(gw, _provider("world"), config=GameConfig(max_guesses=3))
    assert s.state.target_word == "world"


def test_solved_round_saved_as_playing_is_not_resumed():
    store = MemoryStore()
    gw = PersistenceGateway(store)
    gw.save_game_state(apply_guess(start_round("hello", now=0), "hello", now=1))
    record = json.loads(store.data[GAME_STATE_KEY])
    record["status"], record["ended_at"] = "playing", None
    store.data[GAME_STATE_KEY] = json.dumps(record)
    s = GameSession(gw, _provider("world"))
    assert s.state.target_word == "world"
    assert s.state.guess_index == 0


def test_undecodable_save_file_starts_a_new_round(tmp_path):
    (tmp_path / f"{GAME_STATE_KEY}.json").write_bytes(b'{"target_word": "\xff\xfe"}')
    s = _session(JsonFileStore(tmp_path))
    assert s.state.target_word == "hello"
    assert s.state.status is GameStatus.PLAYING


def test_start_new_game_and_reset():
    s = _session(names=("hello", "world"))
    s.make_guess("holly")
    fresh = s.start_new_game()
    assert fresh.target_word == "world" and fresh.guess_index == 0
    s.make_guess("words")
    again = s.reset_game()
    assert again.target_word == "world" and again.guesses == ()
    assert s.statistics.games_played == 0


def test_plays_without_persistence():
    s = _session(DisabledStore())
    assert s.make_guess("hello").status is GameStatus.WON
    assert s.statistics.games_won == 1


def test_is_valid_guess_format():
    s = _session()
    assert s.is_valid_guess_format("HELLO")
    assert not s.is_valid_guess_format("hell")
    assert not s.is_valid_guess_format("hell0")


def test_avatar_resolved_once_per_target():
    resolver = FakeResolver(url="https://img.example/{name}")
    s = _session(names=("hello", "world"), avatar_resolver=resolver)
    assert s.avatar_url == "https://img.example/hello"
    assert s.avatar_url == "https://img.example/hello"
    assert resolver.calls == 1
    s.reset_game()
    assert s.avatar_url == "https://img.example/hello"
    assert resolver.calls == 1
    s.start_new_game()
    assert s.avatar_url == "https://img.example/world"
    assert resolver.calls == 2


@pytest.mark.parametrize("resolver", [None, FakeResolver(), FakeResolver(fail=True)])
def test_missing_or_failing_avatar_is_tolerated(resolver):
    s = _session(avatar_resolver=resolver)
    assert s.avatar_url is None
    assert s.make_guess("hello").status is GameStatus.WON
