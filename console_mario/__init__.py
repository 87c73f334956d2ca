"""A side-scrolling platformer played in a curses terminal, with its game logic usable on its own."""

__version__ = "0.1.0"
__all__ = ["__version__"]