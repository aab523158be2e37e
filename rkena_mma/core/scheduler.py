"""
Scheduler
=========
One-shot deferred callbacks di atas real-time clock host.
Tiap callback membawa generation; callback dari match lama di-drop.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

logger = logging.getLogger(__name__)


@dataclass
class _Pending:
    due_ms: float
    generation: int
    callback: Callable[[], None]


class Scheduler:
    """Timer sederhana yang di-advance manual dari frame loop"""

    def __init__(self):
        self.now_ms = 0.0
        self.generation = 0
        self._pending: List[_Pending] = []

    def call_later(self, delay_ms: float, callback: Callable[[], None]):
        """Jadwalkan callback sekali jalan setelah delay_ms"""
        self._pending.append(_Pending(self.now_ms + delay_ms, self.generation, callback))

    def advance(self, dt_ms: float) -> int:
        """
        Majukan clock, jalankan semua callback yang sudah due.
        Return jumlah callback yang dijalankan.
        """
        self.now_ms += dt_ms
        due = [p for p in self._pending if p.due_ms <= self.now_ms]
        if not due:
            return 0

        self._pending = [p for p in self._pending if p.due_ms > self.now_ms]
        fired = 0
        for pending in sorted(due, key=lambda p: p.due_ms):
            if pending.generation != self.generation:
                logger.debug("Dropping stale callback from generation %d", pending.generation)
                continue
            pending.callback()
            fired += 1
        return fired

    def clear(self):
        """Buang semua pending callback dan naikkan generation"""
        self._pending.clear()
        self.generation += 1
