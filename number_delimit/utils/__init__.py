"""Formatting utilities package.

Ensures Python treats this directory as a package so absolute imports like
`from number_delimit.utils.errors import InvalidNumberError` resolve.
"""

__all__ = [
    "conversion",
    "delimit",
    "errors",
]
