"""A tile-based collect-and-escape puzzle game, with a printf-style formatter and a chunked line reader."""

__version__ = "0.1.0"
__all__ = ["printf", "linereader", "gamemap", "game", "display"]