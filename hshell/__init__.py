"""A small Unix command shell with aliases, variables, history and chaining."""

__version__ = "0.1.0"

__all__ = ["aliases", "chain", "environment", "history", "path", "shell", "text"]