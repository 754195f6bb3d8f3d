"""pygame screens for a Truco card game: resolution picker, intro, title, name entry, character and opponent choice, pause and options menus."""

__version__ = "0.1.0"