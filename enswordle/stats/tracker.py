"""
Long-run play statistics.

`record_outcome` must be fed exactly once per finished round; the
Session takes care of that. Calling it for an unfinished round, or twice
for the same one, silently skews the totals.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class GameStatistics:
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "guess_distribution", MappingProxyType(dict(self.guess_distribution)))

    @property
    def win_rate(self) -> int:
        """Percentage of games won, rounded; 0 before the first game."""
        if not self.games_played:
            return 0
        return round(100 * self.games_won / self.games_played)


def default_statistics() -> GameStatistics:
    return GameStatistics()


def record_outcome(stats: GameStatistics, won: bool, guess_count: int) -> GameStatistics:
    """Return `stats` updated with one finished game."""
    if not won:
        return dataclasses.replace(
            stats, games_played=stats.games_played + 1, current_streak=0)

    streak = stats.current_streak + 1
    distribution = dict(stats.guess_distribution)
    distribution[guess_count] = distribution.get(guess_count, 0) + 1
    return dataclasses.replace(
        stats,
        games_played=stats.games_played + 1,
        games_won=stats.games_won + 1,
        current_streak=streak,
        max_streak=max(stats.max_streak, streak),
        guess_distribution=distribution,
    )
