"""
Deferred presentation effects ("flash the feedback, then revert").

Every effect is tied to the generation it was scheduled in. invalidate()
cancels whatever is pending and starts a new generation, so a revert that was
scheduled for an old game can never touch the new one.
"""

import logging
from threading import RLock
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

# call_later(delay, fn) -> handle with cancel(); threading.Timer and
# asyncio's loop.call_later both fit.
CallLater = Callable[[float, Callable[[], None]], Any]


class ScheduledEffect:
    def __init__(self, scheduler: "EffectScheduler", generation: int, callback: Callable[[], None]):
        self._scheduler = scheduler
        self.generation = generation
        self._callback = callback
        self.cancelled = False
        self.fired = False
        self.handle: Any = None

    @property
    def stale(self) -> bool:
        return self.cancelled or self.generation != self._scheduler.generation

    def cancel(self) -> None:
        self.cancelled = True
        self._scheduler._forget(self)
        if self.handle is not None:
            self.handle.cancel()

    def fire(self) -> bool:
        """Run the callback unless cancelled, already fired, or from an old generation."""
        with self._scheduler._lock:
            self._scheduler._forget(self)
            if self.fired or self.stale:
                return False
            self.fired = True
            self._callback()
        return True


class EffectScheduler:
    def __init__(self, call_later: Optional[CallLater] = None):
        self._call_later = call_later
        self._pending: List[ScheduledEffect] = []
        self._lock = RLock()
        self.generation = 0

    @property
    def pending(self) -> List[ScheduledEffect]:
        return list(self._pending)

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledEffect:
        with self._lock:
            effect = ScheduledEffect(self, self.generation, callback)
            self._pending.append(effect)
        if self._call_later is not None:
            effect.handle = self._call_later(delay, effect.fire)
        return effect

    def invalidate(self) -> None:
        with self._lock:
            pending = list(self._pending)
            for effect in pending:
                effect.cancel()
            self.generation += 1
        if pending:
            logger.debug("Cancelled %d pending effect(s)", len(pending))

    def _forget(self, effect: ScheduledEffect) -> None:
        with self._lock:
            if effect in self._pending:
                self._pending.remove(effect)
