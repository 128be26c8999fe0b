"""Front-end state for a grid-based text editor: geometry, animation, cursor, keyboard, fonts and settings."""

__version__ = "0.1.0"