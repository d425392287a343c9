"""Simple accumulating timer."""

from dataclasses import dataclass


@dataclass
class Cooldown:
    """Accumulates elapsed time until a target duration is reached."""

    target: float = 0.0
    value: float = 0.0

    def update(self, dt: float) -> None:
        self.value += dt

    def update_auto_reset(self, dt: float) -> bool:
        """Advance the timer; if it became ready, reset it and return True."""
        self.update(dt)
        if self.ready():
            self.reset()
            return True
        return False

    def ready(self) -> bool:
        return self.value >= self.target

    def ready_next(self, dt: float) -> bool:
        """True if the timer is not ready yet but will be after ``dt``."""
        return self.value < self.target and self.value + dt >= self.target

    def ratio(self) -> float:
        return self.value / self.target

    def reset(self) -> None:
        self.value = 0.0