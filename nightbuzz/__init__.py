"""Night Buzz: venue scoring and real-time social buzz for nightlife leaderboards."""

__version__ = "0.1.0"
