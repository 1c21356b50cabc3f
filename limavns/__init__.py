"""Variable neighborhood search for balanced minimum sum-of-squares clustering."""

__version__ = "0.1.0"