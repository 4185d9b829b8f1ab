"""Room-tagged video upload and playback service."""

__version__ = "1.0.0"
