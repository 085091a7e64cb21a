"""A turn-based console economy game about money, pills, stress and houses."""

__version__ = "0.1.0"
__all__ = ["console", "housing", "menu", "player", "shop", "world"]