"""Exceptions raised by badgegen."""

from __future__ import annotations


class BadgeError(Exception):
    """Base error for badge generation failures."""


class InvalidUrlError(BadgeError, ValueError):
    """Error raised when a URL cannot be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str = "URL must include a scheme and host") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL '{url}': {reason}")
