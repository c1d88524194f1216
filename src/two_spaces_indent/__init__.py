"""Two-space indent commands for line-based editors."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "indent",
    "plugin",
    "runtime",
    "settings",
]

__version__ = "1.0.0"
