"""Repeating refresh tasks built on sched.scheduler, plus a small background pool."""
import logging
import sched
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Optional, Set


class RepeatingTask:
    """A callback re-armed every `interval` seconds until cancelled."""

    def __init__(self, scheduler: sched.scheduler, name: str, interval: float, callback: Callable[[], None]):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.name = name
        self.interval = interval
        self.callback = callback
        self.run_count = 0
        self._scheduler = scheduler
        self._event: Optional[sched.Event] = None
        self._deadline: Optional[float] = None
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled

    def start(self) -> None:
        """Run once right away, then arm the next run."""
        self._deadline = self._scheduler.timefunc()
        self._run()

    def cancel(self) -> None:
        self._cancelled = True
        if self._event is not None:
            try:
                self._scheduler.cancel(self._event)
            except ValueError:
                # already dispatched
                pass
            self._event = None

    def _run(self) -> None:
        self._event = None
        if self._cancelled:
            return
        self.run_count += 1
        try:
            self.callback()
        except Exception:
            logging.exception(f"Refresh task '{self.name}' failed; it stays scheduled")
        if not self._cancelled:
            self.arm()

    def arm(self) -> None:
        """
        Queue the next run one interval after the previous deadline.

        Deadlines do not drift with the callback's runtime. If the task fell
        more than a whole interval behind, the missed runs are skipped and
        the schedule restarts from now.
        """
        now = self._scheduler.timefunc()
        if self._deadline is None:
            self._deadline = now
        self._deadline += self.interval
        if self._deadline <= now:
            self._deadline = now + self.interval
        self._event = self._scheduler.enterabs(self._deadline, 0, self._run)


class RefreshScheduler:
    """
    Owns a set of independent repeating refresh tasks.

    All task callbacks run on the thread that calls run() or run_pending(),
    with no ordering between tasks. Slow work such as a network fetch goes
    through submit(): it runs on a background thread and its result is handed
    back to the dispatch thread, so it never holds up the other tasks.

    Use as a context manager so every task is cancelled on exit:

        with RefreshScheduler() as scheduler:
            scheduler.every("time", 1, update_time)
            scheduler.run()
    """

    def __init__(
        self,
        timefunc: Callable[[], float] = time.monotonic,
        delayfunc: Callable[[float], None] = time.sleep,
        max_workers: int = 2
    ):
        self._scheduler = sched.scheduler(timefunc, delayfunc)
        self._tasks: Dict[str, RepeatingTask] = {}
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._in_flight: Set[Future] = set()
        self._in_flight_lock = threading.Lock()
        # Bumped on teardown so results from older submissions are dropped
        self._generation = 0

    def __enter__(self) -> "RefreshScheduler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel_all()

    @property
    def tasks(self) -> Dict[str, RepeatingTask]:
        return dict(self._tasks)

    def every(self, name: str, interval: float, callback: Callable[[], None], start: bool = True) -> RepeatingTask:
        """
        Register a repeating task.

        Args:
            name: Unique task name; registering an existing name replaces it
            interval: Seconds between runs
            callback: Zero-argument callable
            start: Run immediately (otherwise the first run is one interval away)

        Returns:
            RepeatingTask: Handle that can be cancelled on its own
        """
        if name in self._tasks:
            self.cancel(name)
        task = RepeatingTask(self._scheduler, name, interval, callback)
        self._tasks[name] = task
        logging.debug(f"Scheduling '{name}' every {interval}s")
        if start:
            task.start()
        else:
            task.arm()
        return task

    def call_soon(self, callback: Callable[[], None]) -> None:
        """Queue a one-off callback for the next dispatch."""
        self._scheduler.enter(0, 0, callback)

    def submit(self, work: Callable[[], Any], on_done: Callable[[Any], None]) -> Future:
        """
        Run `work` on a background thread, then `on_done(result)` on the dispatch thread.

        Submissions may overlap; each result is delivered as it arrives, so
        the last one to finish wins. Results that arrive after cancel_all()
        are dropped.

        Returns:
            Future: Completes once the result is queued for dispatch
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="refresh")
        generation = self._generation

        def run_in_background():
            try:
                result = work()
            except Exception:
                logging.exception("Background refresh work failed")
                return
            if generation != self._generation:
                logging.debug("Dropping background result that finished after teardown")
                return
            self.call_soon(lambda: deliver(result))

        def deliver(result):
            # cancel_all() may have run between queueing and dispatch
            if generation == self._generation:
                on_done(result)

        future = self._executor.submit(run_in_background)
        with self._in_flight_lock:
            self._in_flight.add(future)
        future.add_done_callback(self._forget)
        return future

    def _forget(self, future: Future) -> None:
        with self._in_flight_lock:
            self._in_flight.discard(future)

    def wait_background(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for submitted work to finish and queue its results.

        Returns:
            True if nothing is still running
        """
        with self._in_flight_lock:
            running = list(self._in_flight)
        _, not_done = wait(running, timeout=timeout)
        return not not_done

    def cancel(self, name: str) -> None:
        task = self._tasks.pop(name, None)
        if task is not None:
            task.cancel()
            logging.debug(f"Cancelled '{name}'")

    def cancel_all(self) -> None:
        """Cancel every task and background job; nothing stays queued afterwards."""
        self._generation += 1
        for name in list(self._tasks):
            self.cancel(name)
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
        for event in self._scheduler.queue:
            try:
                self._scheduler.cancel(event)
            except ValueError:
                pass
        logging.info("All refresh tasks cancelled")

    def pending(self) -> int:
        """Number of queued runs."""
        return len(self._scheduler.queue)

    def run_pending(self) -> Optional[float]:
        """
        Dispatch every task that is due without blocking.

        Returns:
            Seconds until the next run, or None if nothing is queued
        """
        return self._scheduler.run(blocking=False)

    def run(self) -> None:
        """Block dispatching tasks until none remain."""
        self._scheduler.run()
