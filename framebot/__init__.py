"""Twitch chat bot answering Guilty Gear Strive frame-data queries."""

__version__ = "0.3.0"
