"""ZeitTracker: employee time-clock service."""

__version__ = "1.0.0"
