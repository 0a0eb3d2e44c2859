import pygame


class Rect:
    """Axis-aligned float rectangle, top-left origin, y grows downward."""

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: float, y: float, w: float, h: float):
        if not (w > 0 and h > 0):
            raise ValueError(f"Rect needs a positive size, got {w}x{h}")
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def copy(self) -> "Rect":
        return Rect(self.x, self.y, self.w, self.h)

    def to_pygame(self) -> pygame.Rect:
        # Drawing only; collisions never go through pygame's integer rects
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def __repr__(self):
        return f"Rect({self.x:g}, {self.y:g}, {self.w:g}, {self.h:g})"


def overlaps(a: Rect, b: Rect) -> bool:
    """Strict intersection: rectangles that only share an edge do not overlap."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y
