"""Small toy models: 2D vectors, flock settings, slider display, a to-do list, nested-list hovering and a keyed list of random people."""

__version__ = "0.1.0"