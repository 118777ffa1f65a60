"""24-bit RGB colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    def shifted(self, dr: int, dg: int, db: int) -> Color:
        """Return a colour with each channel offset, wrapping modulo 256."""
        return Color((self.r + dr) % 256, (self.g + dg) % 256, (self.b + db) % 256)