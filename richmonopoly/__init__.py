"""Building blocks for a four-player property trading board game."""

__version__ = "0.1.0"