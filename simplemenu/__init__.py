"""ROM naming, game ordering, favorites, layout, screen text and device helpers for a handheld launcher."""

__version__ = "0.1.0"