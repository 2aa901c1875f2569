"""GIF decoding and playback, in-memory files, UI layout, vector maths and listener helpers."""

__version__ = "0.1.0"