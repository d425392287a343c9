"""Background worker that fills a double buffer."""

import threading
from abc import ABC, abstractmethod
from typing import Any, Optional

from antsim.double_buffer import DoubleObject


class AsyncRenderer(ABC):
    """Repeatedly updates the back buffer of ``target`` in a thread.

    After each update the buffers are swapped, unless a reader holds
    ``lock``; in that case updating pauses until a swap succeeds.
    """

    def __init__(self, target: DoubleObject) -> None:
        self.buffers = target
        self.lock = threading.Lock()
        self._running = False
        self._swap_ok = True
        self._thread: Optional[threading.Thread] = None

    @abstractmethod
    def initialize_buffer(self, buffer: Any) -> None:
        """Prepare one of the two buffers before rendering starts."""

    @abstractmethod
    def update_buffer(self) -> None:
        """Produce the next frame into the back buffer."""

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("renderer already started")
        self.initialize_buffer(self.buffers.current())
        self.initialize_buffer(self.buffers.last())
        self._running = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._running = False
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "AsyncRenderer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _run(self) -> None:
        while self._running:
            if self._swap_ok:
                self.update_buffer()
            self._try_swap()

    def _try_swap(self) -> None:
        if self.lock.acquire(blocking=False):
            try:
                self._swap_ok = True
                self.buffers.swap()
            finally:
                self.lock.release()
        else:
            self._swap_ok = False