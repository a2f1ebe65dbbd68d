"""Text-driven role-playing session engine."""

__version__ = "0.1.0"
