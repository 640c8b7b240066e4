"""Option parsing, permission strings and helpers for an ls-style lister."""

__version__ = "0.1.0"