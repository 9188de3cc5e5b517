"""A widget toolkit with an event engine, drawn with pygame."""

__version__ = "0.4.0"