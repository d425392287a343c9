"""Rectangle with rounded corners, described as primitive shapes."""

from dataclasses import dataclass
from typing import List, Tuple, Union

Color = Tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class Rect:
    width: float
    height: float
    x: float
    y: float
    color: Color = WHITE


@dataclass(frozen=True)
class Circle:
    """Circle given by radius and the top-left corner of its bounding box."""

    radius: float
    x: float
    y: float
    color: Color = WHITE


@dataclass
class RoundedRectangle:
    width: float
    height: float
    radius: float
    x: float
    y: float
    color: Color = WHITE

    @classmethod
    def from_size(
        cls,
        size: Tuple[float, float],
        position: Tuple[float, float],
        radius: float,
    ) -> "RoundedRectangle":
        """Build from size and position, clamping the radius to fit."""
        width, height = size
        x, y = position
        return cls(width, height, min(0.5 * min(width, height), radius), x, y)

    def shapes(self) -> List[Union[Rect, Circle]]:
        """Two crossing rectangles followed by the four corner circles."""
        r, d = self.radius, 2 * self.radius
        x, y, w, h, c = self.x, self.y, self.width, self.height, self.color
        return [
            Rect(w - d, h, x + r, y, c),
            Rect(w, h - d, x, y + r, c),
            Circle(r, x, y, c),
            Circle(r, x + w - d, y, c),
            Circle(r, x + w - d, y + h - d, c),
            Circle(r, x, y + h - d, c),
        ]