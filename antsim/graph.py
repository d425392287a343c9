"""Rolling bar chart of recent values."""

from typing import List, Tuple

WHITE = (255, 255, 255, 255)


class Graphic:
    """Fixed-size ring of values drawn as a filled chart."""

    def __init__(
        self,
        values_count: int,
        size: Tuple[float, float],
        position: Tuple[float, float],
    ) -> None:
        if values_count <= 0:
            raise ValueError("values_count must be positive")
        self.values: List[float] = [0.0] * values_count
        self.max_value = 0.0
        self.width, self.height = size
        self.x, self.y = position
        self.color = WHITE
        self.current_index = 0
        self.full = False
        self.last_value = 0.0

    def add_value(self, value: float) -> None:
        self.last_value = value
        size = len(self.values)
        self.values[self.current_index % size] = value
        self.current_index += 1
        self.max_value = max(self.max_value, value)
        if self.current_index == size:
            self.full = True

    def next(self) -> None:
        """Move to the next slot, wrapping around."""
        self.current_index += 1
        if self.current_index == len(self.values):
            self.full = True
            self.current_index = 0

    def set_last_value(self, value: float) -> None:
        self.values[self.current_index % len(self.values)] = value
        self.max_value = max(self.max_value, value)

    def vertices(self) -> List[Tuple[float, float]]:
        """Triangle-strip positions: a bottom and a top point per value."""
        size = len(self.values)
        bar_width = self.width / size
        height_factor = self.height / self.max_value if self.max_value else 0.0
        bottom = self.y + self.height
        points: List[Tuple[float, float]] = []
        for i in range(size):
            index = (self.current_index + 1 + i) % size if self.full else i
            bar_height = self.values[index] * height_factor
            px = self.x + i * bar_width
            points.append((px, bottom))
            points.append((px, bottom - bar_height))
        return points