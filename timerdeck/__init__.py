"""TimerDeck — categorized countdown timers with halfway alerts."""

__version__ = "0.1.0"
