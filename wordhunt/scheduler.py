from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class ManualClock:
    """Virtual time source; call it like ``time.monotonic``."""

    def __init__(self, start: float = 0.0) -> None:
        self.t = float(start)

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += float(seconds)

    def advance_ms(self, ms: float) -> None:
        self.advance(ms / 1000.0)


@dataclass
class _Task:
    name: str
    due: float
    callback: Callable[[], None]
    period: Optional[float] = None


class Scheduler:
    """Named one-shot and repeating tasks polled from the main loop.

    Scheduling a name that is already pending replaces the pending task, so
    a task never stacks with an older copy of itself.
    """

    def __init__(self, now_fn: Callable[[], float]) -> None:
        self._now = now_fn
        self._tasks: Dict[str, _Task] = {}

    def call_later(self, name: str, delay: float, callback: Callable[[], None]) -> None:
        self._tasks[name] = _Task(name, self._now() + max(0.0, float(delay)), callback)

    def call_every(self, name: str, period: float, callback: Callable[[], None]) -> None:
        period = float(period)
        if period <= 0.0:
            raise ValueError(f"period must be positive, got {period}")
        self._tasks[name] = _Task(name, self._now() + period, callback, period)

    def cancel(self, name: str) -> bool:
        return self._tasks.pop(name, None) is not None

    def cancel_all(self) -> None:
        self._tasks.clear()

    def is_scheduled(self, name: str) -> bool:
        return name in self._tasks

    def next_due(self, name: str) -> Optional[float]:
        task = self._tasks.get(name)
        return task.due if task else None

    def run_due(self) -> int:
        """Fire every task that is due by now, earliest first.

        A repeating task fires at most once per call and its next run is
        counted from now, so a stalled frame does not cause a burst.
        """
        now = self._now()
        fired = 0
        while True:
            due = [t for t in self._tasks.values() if t.due <= now]
            if not due:
                return fired
            task = min(due, key=lambda t: t.due)
            if task.period is None:
                del self._tasks[task.name]
            else:
                task.due = now + task.period
            task.callback()
            fired += 1


class ShuffleScheduler:
    """The single repeating shuffle timer.

    ``arm`` always disarms first, so only one shuffle task exists and it
    always runs at the most recently armed period.
    """

    TASK = "shuffle"

    def __init__(self, scheduler: Scheduler, on_tick: Callable[[], None]) -> None:
        self._sched = scheduler
        self._on_tick = on_tick
        self.interval_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self._sched.is_scheduled(self.TASK)

    def arm(self, interval_ms: int) -> None:
        self.disarm()
        self._sched.call_every(self.TASK, interval_ms / 1000.0, self._on_tick)
        self.interval_ms = int(interval_ms)
        logger.debug("Shuffle timer armed at %d ms", self.interval_ms)

    def ensure(self, interval_ms: int) -> None:
        if not self.armed or self.interval_ms != int(interval_ms):
            self.arm(interval_ms)

    def disarm(self) -> None:
        if self._sched.cancel(self.TASK):
            logger.debug("Shuffle timer disarmed")
        self.interval_ms = None

    def __enter__(self) -> "ShuffleScheduler":
        return self

    def __exit__(self, *exc) -> None:
        self.disarm()


__all__ = ["ManualClock", "Scheduler", "ShuffleScheduler"]
