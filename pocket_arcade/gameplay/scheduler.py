"""
Fixed-step scheduling for the real-time engine.
NO UI DEPENDENCIES.

A render loop runs at whatever frame rate it gets. The shooter wants its
tick at a steady ~20 Hz and its spawner at ~1 Hz regardless. The scheduler
accumulates frame time and fires each registered callback once per whole
interval elapsed. It owns no clock and no thread; stop calling advance()
and nothing else happens.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# Frames longer than this are treated as a stall (debugger, window drag)
MAX_FRAME_SECONDS = 0.25


@dataclass
class ScheduledTask:
    """A callback fired every `interval` seconds of accumulated time."""
    name: str
    interval: float
    callback: Callable[[], Any]
    accumulator: float = 0.0
    runs: int = 0


class FixedStepScheduler:
    """
    Turns variable frame deltas into fixed-interval calls.

    Usage:
        scheduler = FixedStepScheduler()
        scheduler.every("tick", 0.05, engine.tick)
        scheduler.every("spawn", 1.0, engine.spawn_obstacle)
        while running:
            scheduler.advance(dt)
    """

    def __init__(self, max_frame: float = MAX_FRAME_SECONDS):
        self.max_frame = max_frame
        self._tasks: Dict[str, ScheduledTask] = {}
        self.is_paused = False

    def every(self, name: str, interval: float, callback: Callable[[], Any]) -> ScheduledTask:
        """Register (or replace) a named periodic callback."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        task = ScheduledTask(name=name, interval=interval, callback=callback)
        self._tasks[name] = task
        logger.debug(f"Scheduled '{name}' every {interval:.3f}s")
        return task

    def cancel(self, name: str) -> None:
        """Stop calling a named task. Unknown names are ignored."""
        self._tasks.pop(name, None)

    def pause(self) -> None:
        self.is_paused = True

    def resume(self) -> None:
        self.is_paused = False

    def advance(self, dt: float) -> List[Any]:
        """
        Account for dt seconds of wall time.
        Returns the callback results, in firing order.
        """
        if self.is_paused or dt <= 0:
            return []

        if dt > self.max_frame:
            logger.warning(f"Frame took {dt:.3f}s, clamping to {self.max_frame:.3f}s")
            dt = self.max_frame

        results = []
        for task in list(self._tasks.values()):
            # A callback earlier in this frame may have cancelled it
            if self._tasks.get(task.name) is not task:
                continue
            task.accumulator += dt
            while task.accumulator >= task.interval and self._tasks.get(task.name) is task:
                task.accumulator -= task.interval
                task.runs += 1
                results.append(task.callback())
        return results

    def get_task(self, name: str) -> ScheduledTask:
        return self._tasks[name]
