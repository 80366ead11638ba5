"""A small text role-playing battle engine with heroes, enemies and observers."""

__version__ = "0.1.0"
__all__ = ["__version__"]