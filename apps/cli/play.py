# apps/cli/play.py
"""
Terminal front-end for ENS-Wordle.

This script:
  1) Opens the local store (or runs without persistence with --no-save).
  2) Resumes an unfinished round, or starts one from the curated names.
  3) Reads guesses from stdin and prints G/Y/- feedback after each one.
  4) Prints the running statistics when the round ends.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --new --difficulty easy
    python -m apps.cli.play --stats
"""

from __future__ import annotations

import argparse
import logging
import string
import sys
from typing import Callable

from enswordle.config import DEFAULT_CONFIG, GameConfig
from enswordle.datasets import DEFAULT_NAMES_PATH, NameProvider
from enswordle.engine import LetterState, state_of, to_pattern
from enswordle.errors import GuessError
from enswordle.game import GameStatus, difficulty_for_length, duration_seconds
from enswordle.session import GameSession
from enswordle.stats import default_statistics
from enswordle.storage import DisabledStore, JsonFileStore, PersistenceGateway

_KEY_MARKS = {
    LetterState.UNUSED: "{}",
    LetterState.ABSENT: ".",
    LetterState.WRONG_POSITION: "{}?",
    LetterState.CORRECT: "{}!",
}


def _keyboard(state) -> str:
    """One-line keyboard: a! = correct, a? = elsewhere, . = absent."""
    return " ".join(
        _KEY_MARKS[state_of(state.letter_knowledge, ch)].format(ch)
        for ch in string.ascii_lowercase
    )


def _print_stats(stats, max_guesses: int) -> None:
    print(f"Played {stats.games_played} | Win % {stats.win_rate} | "
          f"Streak {stats.current_streak} | Max streak {stats.max_streak}")
    for n in range(1, max_guesses + 1):
        count = stats.guess_distribution.get(n, 0)
        print(f"  {n}: {'#' * count} {count}")


def _build_provider(args) -> Callable[[], str]:
    provider = NameProvider.from_file(args.names, seed=args.seed)
    if args.difficulty:
        return lambda: provider.random_name_by_difficulty(args.difficulty).name
    if args.category:
        return lambda: provider.random_name_by_category(args.category).name
    return provider


def _build_resolver(args, config: GameConfig):
    if not args.avatar:
        return None
    # Network-bound; only imported when asked for
    from enswordle.avatar.metadata import MetadataAvatarResolver
    return MetadataAvatarResolver(timeout=config.avatar_timeout)


def main(argv=None):
    ap = argparse.ArgumentParser(description="ENS-Wordle: guess the ENS name")
    ap.add_argument("--names", default=str(DEFAULT_NAMES_PATH), help="curated names JSON")
    ap.add_argument("--store-dir", default=DEFAULT_CONFIG.store_dir,
                    help="directory for saved game/statistics")
    ap.add_argument("--no-save", action="store_true", help="play without persistence")
    ap.add_argument("--new", action="store_true", help="discard any unfinished round")
    ap.add_argument("--difficulty", choices=["easy", "medium", "hard"])
    ap.add_argument("--category", choices=["individual", "project", "generic"])
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_CONFIG.max_guesses)
    ap.add_argument("--avatar", action="store_true", help="look up the avatar clue online")
    ap.add_argument("--stats", action="store_true", help="print statistics and exit")
    ap.add_argument("--seed", type=int, help="RNG seed for name selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = GameConfig(max_guesses=args.max_guesses, store_dir=args.store_dir)
    store = DisabledStore() if args.no_save else JsonFileStore(config.store_dir)
    persisting = store.is_available()
    if not persisting:
        print("Storage unavailable, game progress will not be saved", file=sys.stderr)
    gateway = PersistenceGateway(store)

    if args.stats:
        _print_stats(gateway.load_statistics() or default_statistics(), config.max_guesses)
        return 0

    session = GameSession(gateway, _build_provider(args),
                          avatar_resolver=_build_resolver(args, config), config=config)
    if args.new:
        session.start_new_game()

    state = session.state
    print(f"Guess the ENS name: {state.target_length} letters "
          f"({difficulty_for_length(state.target_length)}), "
          f"{config.max_guesses} tries.")
    if session.avatar_url:
        print(f"Avatar clue: {session.avatar_url}")
    for g in state.guesses:
        print(f"  {g.word}  {to_pattern(g.feedback)}")

    while not state.is_over:
        try:
            word = input(f"[{state.guess_index + 1}/{config.max_guesses}] > ")
        except EOFError:
            print()
            print("Progress saved." if persisting else "Bye.")
            return 0
        try:
            state = session.make_guess(word)
        except GuessError as e:
            print(f"  {e}")
            continue
        print(f"  {state.last_guess.word}  {to_pattern(state.last_guess.feedback)}")
        print(f"  {_keyboard(state)}")

    if state.status is GameStatus.WON:
        print(f"Solved {state.target_word}.eth in {state.guess_index} "
              f"({duration_seconds(state)}s)")
    else:
        print(f"Out of tries. It was {state.target_word}.eth")
    _print_stats(session.statistics, config.max_guesses)
    return 0


if __name__ == "__main__":
    sys.exit(main())
