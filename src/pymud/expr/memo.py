from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _Cell(Generic[T]):
    __slots__ = ("lock", "ready", "value")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.ready = False
        self.value: T | None = None


class ParticularizationCache(Generic[T]):
    """Compute-once results keyed by factory identity.

    A cache-wide lock only guards insertion of per-factory cells; the
    computation runs under the cell's own lock so concurrent callers for
    the same factory wait for one result while other factories proceed.
    A computation that raises leaves its cell empty.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # the factory is kept alongside its cell so its id cannot be reused
        self._cells: dict[int, tuple[object, _Cell[T]]] = {}

    def _cell(self, factory: object) -> _Cell[T]:
        key = id(factory)
        with self._lock:
            entry = self._cells.get(key)
            if entry is None:
                entry = (factory, _Cell())
                self._cells[key] = entry
            return entry[1]

    def get_or_compute(self, factory: object, compute: Callable[[], T]) -> T:
        cell = self._cell(factory)
        if cell.ready:
            return cell.value
        with cell.lock:
            if not cell.ready:
                logger.debug("particularizing against %r", factory)
                cell.value = compute()
                cell.ready = True
        return cell.value

    def is_cached(self, factory: object) -> bool:
        with self._lock:
            entry = self._cells.get(id(factory))
        return entry is not None and entry[1].ready

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for _, cell in self._cells.values() if cell.ready)


__all__ = ["ParticularizationCache"]
