"""Text-line mouse and keyboard events, key tables, and their replay on an X display through xdotool."""

__version__ = "0.1.0"