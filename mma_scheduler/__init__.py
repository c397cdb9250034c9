"""MMA Scheduler: UFC events, fighter profiles and divisional rankings."""

__version__ = "0.1.0"
