"""Search the live streams of a Twitch category."""

from .__version__ import __version__

__all__ = ["__version__"]
