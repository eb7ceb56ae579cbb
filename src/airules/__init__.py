"""airules: quick access to a library of Markdown rule documents."""

__version__ = "0.1.0"
