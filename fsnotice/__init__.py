"""Building blocks for file-system watchers: watch actions and errors, a re-entrant mutex, Unicode conversion, file-system and platform queries."""

__version__ = "0.1.0"

__all__ = [
    "codepoints",
    "convert_utf8",
    "convert_wide",
    "errors",
    "filesystem",
    "sync",
    "system",
]