"""Axis-aligned boxes described by their centre and size."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Box:
    """A rectangle centred at (pos_x, pos_y) with the given width and height."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    width: float = 1.0
    height: float = 1.0

    def intersect(self, other: Box) -> bool:
        """Return True if this box overlaps ``other``."""
        return (
            abs(self.pos_x - other.pos_x) * 2.0 < self.width + other.width
            and abs(self.pos_y - other.pos_y) * 2.0 < self.height + other.height
        )

    def intersect_down(self, other: Box) -> float:
        """Return the vertical offset that separates this box from ``other`` below it.

        The result is 0.0 when there is no collision, or when this box lies
        below ``other``.
        """
        if (
            abs(self.pos_x - other.pos_x) * 2.0 >= self.width + other.width
            or self.pos_y > other.pos_y
        ):
            return 0.0
        return min(
            0.0,
            other.pos_y - other.height / 2.0 - self.pos_y - self.height / 2.0,
        )

    def intersect_sideways(self, other: Box) -> float:
        """Return the horizontal offset that separates this box from ``other``.

        The result is 0.0 when there is no collision. The vertical test
        compares against the sum of the widths.
        """
        if abs(self.pos_y - other.pos_y) * 2.0 >= self.width + other.width:
            return 0.0
        if self.pos_x > other.pos_x:
            return max(
                0.0,
                other.pos_x + other.width / 2.0 - self.pos_x + self.width / 2.0,
            )
        return min(
            0.0,
            other.pos_x - other.width / 2.0 - self.pos_x - self.width / 2.0,
        )