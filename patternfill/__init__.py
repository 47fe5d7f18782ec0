"""patternfill — motif pattern fills for vector regions."""

__version__ = "0.1.0"
