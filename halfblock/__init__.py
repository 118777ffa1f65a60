"""Draw true-colour pixels in a terminal using half-block characters."""

__version__ = "0.1.0"
__all__ = ["color", "grid", "window", "demo"]