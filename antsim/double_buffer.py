"""A pair of objects used alternately as front and back buffer."""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class DoubleObject(Generic[T]):
    """Holds two instances built by ``factory`` and flips between them."""

    def __init__(self, factory: Callable[..., T], *args, **kwargs) -> None:
        self.current_buffer = 0
        self.buffers: list = [factory(*args, **kwargs), factory(*args, **kwargs)]

    def swap(self) -> None:
        self.current_buffer = 1 - self.current_buffer

    def current(self) -> T:
        return self.buffers[self.current_buffer]

    def last(self) -> T:
        return self.buffers[1 - self.current_buffer]