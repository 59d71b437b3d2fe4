"""A console battle simulation between two randomly recruited armies of creatures."""

__version__ = "1.0.0"
__all__ = ["army", "cli", "creatures", "game"]