"""
ENS-Wordle: guess a registry name from its avatar.

The core (engine, game, stats, storage) is pure Python with no network
access. `datasets` and `avatar` are the collaborators that supply target
names and avatar clues.
"""

__version__ = "0.1.0"
