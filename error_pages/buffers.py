import contextlib
import threading
from io import StringIO
from typing import Iterator, List

DEFAULT_POOL_SIZE = 16


class BufferPool:
    """Free list of text buffers shared by concurrent renders.

    A buffer is owned by exactly one `acquire()` block at a time and is emptied
    before it goes back to the pool. At most `max_size` idle buffers are kept.
    """

    def __init__(self, max_size: int = DEFAULT_POOL_SIZE):
        self.max_size = max_size
        self._free: List[StringIO] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)

    def _get(self) -> StringIO:
        with self._lock:
            if self._free:
                return self._free.pop()
        return StringIO()

    def _put(self, buf: StringIO) -> None:
        buf.seek(0)
        buf.truncate(0)
        with self._lock:
            if len(self._free) < self.max_size:
                self._free.append(buf)

    @contextlib.contextmanager
    def acquire(self) -> Iterator[StringIO]:
        buf = self._get()
        try:
            yield buf
        finally:
            self._put(buf)
