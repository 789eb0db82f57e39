"""Thread-safe compute-once cell."""
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Memoized(Generic[T]):
    """Lazily computes a value once and returns it on every later call.

    Concurrent first callers block on the lock; exactly one runs the
    computation and all of them observe the same result. If the computation
    raises, nothing is stored and the next call tries again.
    """

    def __init__(self, compute: Callable[[], T]):
        self._compute = compute
        self._lock = threading.Lock()
        self._computed = False
        self._value: Optional[T] = None

    @property
    def is_computed(self) -> bool:
        return self._computed

    def __call__(self) -> T:
        if self._computed:
            return self._value

        with self._lock:
            if not self._computed:
                self._value = self._compute()
                self._computed = True

        return self._value
