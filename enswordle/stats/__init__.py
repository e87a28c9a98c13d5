from .tracker import GameStatistics, default_statistics, record_outcome

__all__ = ["GameStatistics", "default_statistics", "record_outcome"]
