"""
Delayed one-shot task scheduling.

The simulator only depends on the Scheduler interface, so the asyncio
implementation used by the API can be swapped for ManualScheduler in tests.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, List

logger = logging.getLogger(__name__)


class ScheduledTask(ABC):
    """Handle for a callback that will run once after a delay."""
    
    @abstractmethod
    def cancel(self) -> None:
        pass
    
    @abstractmethod
    def cancelled(self) -> bool:
        pass


class Scheduler(ABC):
    """Schedules callbacks to run once after a delay."""
    
    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        pass


class AsyncioTask(ScheduledTask):
    """ScheduledTask backed by an asyncio.TimerHandle."""
    
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle
    
    def cancel(self) -> None:
        self._handle.cancel()
    
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioScheduler(Scheduler):
    """Runs callbacks on the running event loop via loop.call_later."""
    
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        loop = asyncio.get_running_loop()
        return AsyncioTask(loop.call_later(delay_seconds, self._run, callback))
    
    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        # An exception here would otherwise only reach the loop's default handler
        try:
            callback()
        except Exception:
            logger.exception("Scheduled task failed")


class ManualTask(ScheduledTask):
    """Task held by a ManualScheduler until its due time is reached."""
    
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self._cancelled = False
        self.fired = False
    
    def cancel(self) -> None:
        self._cancelled = True
    
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(Scheduler):
    """Deterministic scheduler driven by advance(); time never moves on its own."""
    
    def __init__(self):
        self.now = 0.0
        self.tasks: List[ManualTask] = []
    
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualTask(self.now + delay_seconds, callback)
        self.tasks.append(task)
        return task
    
    def pending(self) -> List[ManualTask]:
        return [t for t in self.tasks if not t.fired and not t.cancelled()]
    
    def advance(self, seconds: float) -> int:
        """
        Move time forward, firing due tasks in due-time order.
        
        Tasks scheduled by a firing callback also run if they fall due
        within the window. Returns the number of callbacks run.
        """
        target = self.now + seconds
        ran = 0
        while True:
            due = [t for t in self.pending() if t.due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due)
            self.now = task.due
            task.fired = True
            task.callback()
            ran += 1
        self.now = target
        return ran
    
    def run_all(self) -> int:
        """Fire every pending task, including ones scheduled along the way."""
        ran = 0
        while self.pending():
            ran += self.advance(max(t.due for t in self.pending()) - self.now)
        return ran
