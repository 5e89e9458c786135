"""Terminal lookup for ASCII emoticons."""

__version__ = "0.1.0"
