"""A small brick-breaking arcade game: home menu, playing field and window loop."""

__version__ = "0.1.0"
__all__ = ["defs", "utils", "game", "home", "app"]