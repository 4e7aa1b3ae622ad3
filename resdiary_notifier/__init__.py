"""Scheduled ResDiary availability checks with Pushover notifications."""

__version__ = "0.1.0"
