"""A recycling pool of reusable objects."""

from __future__ import annotations

import threading
import weakref
from collections import deque
from typing import Callable, Generic, Optional, TypeVar

__all__ = ["ResourcePool", "PooledObject"]

T = TypeVar("T")

_DEFAULT_SIZE = 8


class _PoolCore(Generic[T]):
    """Storage shared by a pool and the handles it gives out."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        self.factory = factory
        self.size = size
        self.objects: deque[T] = deque()
        self.busy = threading.Lock()

    def take(self) -> T:
        if self.busy.acquire(blocking=False):
            try:
                if self.objects:
                    return self.objects.popleft()
            finally:
                self.busy.release()
        return self.factory()

    def recycle(self, obj: T) -> None:
        # When the pool is contended or full, the object is simply dropped.
        if self.busy.acquire(blocking=False):
            try:
                if len(self.objects) < self.size:
                    self.objects.append(obj)
            finally:
                self.busy.release()


class PooledObject(Generic[T]):
    """A handle to an object borrowed from a :class:`ResourcePool`.

    Releasing the handle (explicitly, by leaving a ``with`` block, or when it
    is garbage collected) returns the object to its pool unless the handle
    has quit the pool or the pool no longer exists.
    """

    def __init__(
        self,
        value: T,
        core: _PoolCore[T],
        on_recycle: Optional[Callable[[T], None]],
    ) -> None:
        self._value = value
        self._core_ref = weakref.ref(core)
        self._on_recycle = on_recycle
        self._quit = False
        self._released = False

    @property
    def value(self) -> T:
        """The borrowed object."""
        if self._released:
            raise RuntimeError("pooled object already released")
        return self._value

    @property
    def released(self) -> bool:
        return self._released

    def quit(self, flag: bool = True) -> None:
        """Give up (or, with ``False``, resume) returning the object to the pool."""
        self._quit = flag

    def release(self) -> None:
        """Hand the object back; calling it again does nothing."""
        if self._released:
            return
        self._released = True
        value = self._value
        self._value = None
        if self._on_recycle is not None:
            self._on_recycle(value)
        core = self._core_ref()
        if core is not None and not self._quit:
            core.recycle(value)

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        try:
            self.release()
        except Exception:
            pass


class ResourcePool(Generic[T]):
    """Hands out objects made by ``factory`` and keeps up to ``size`` for reuse."""

    def __init__(self, factory: Callable[[], T], size: int = _DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._core = _PoolCore(factory, size)

    @property
    def size(self) -> int:
        return self._core.size

    def set_size(self, size: int) -> None:
        """Set how many idle objects the pool keeps."""
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._core.size = size

    def obtain(self, on_recycle: Optional[Callable[[T], None]] = None) -> PooledObject[T]:
        """Borrow an idle object, or a new one when none is idle.

        ``on_recycle`` is called with the object when its handle is released.
        """
        return PooledObject(self._core.take(), self._core, on_recycle)