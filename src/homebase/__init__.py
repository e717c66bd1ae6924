"""HomeBase: household chore tracking with family leaderboards."""

__version__ = "0.1.0"
