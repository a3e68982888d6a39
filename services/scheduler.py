"""
Background Scheduler Service
Drives the prediction update cycle: a short drift tick and a longer
recalculation tick.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger("pulsenet.scheduler")


class Ticker(ABC):
    """Repeating-job runner the scheduler service registers its jobs on"""

    @abstractmethod
    def add_job(self, func: Callable[[], None], interval_seconds: float, job_id: str) -> None:
        ...

    @abstractmethod
    def start(self) -> None:
        ...

    @abstractmethod
    def shutdown(self) -> None:
        ...


class APSchedulerTicker(Ticker):
    """Wall-clock ticker backed by APScheduler's AsyncIOScheduler"""

    def __init__(self, scheduler: Optional[AsyncIOScheduler] = None):
        self.scheduler = scheduler or AsyncIOScheduler()

    def add_job(self, func, interval_seconds, job_id):
        self.scheduler.add_job(
            func,
            IntervalTrigger(seconds=interval_seconds),
            id=job_id,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

    def start(self):
        self.scheduler.start()

    def shutdown(self):
        # Don't wait for running jobs
        self.scheduler.shutdown(wait=False)


@dataclass
class _ManualJob:
    func: Callable[[], None]
    interval_seconds: float
    next_run: float


class ManualTicker(Ticker):
    """
    Deterministic ticker for tests: time only moves when ``advance`` is called.

    Jobs fire in chronological order, each as many times as its interval
    fits into the advanced span.
    """

    def __init__(self):
        self.jobs: Dict[str, _ManualJob] = {}
        self.elapsed = 0.0
        self.running = False

    def add_job(self, func, interval_seconds, job_id):
        self.jobs[job_id] = _ManualJob(func, interval_seconds, self.elapsed + interval_seconds)

    def start(self):
        self.running = True

    def shutdown(self):
        self.running = False

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every job that falls due.

        Returns:
            Number of job executions
        """
        target = self.elapsed + seconds
        runs = 0

        while self.running:
            due = [job for job in self.jobs.values() if job.next_run <= target]
            if not due:
                break
            job = min(due, key=lambda j: j.next_run)
            self.elapsed = job.next_run
            job.next_run += job.interval_seconds
            job.func()
            runs += 1

        self.elapsed = target
        return runs

    def run_job(self, job_id: str) -> None:
        """Run one job immediately without moving the clock"""
        self.jobs[job_id].func()


class SchedulerService:
    """Service to manage the prediction update cycle.

    Jobs:
    * update_all_predictions – drift tick nudging stored risk scores
    * recalculate_all_risks – recalculation tick (placeholder, no scoring)
    """

    DRIFT_JOB_ID = "update_all_predictions"
    RECALCULATION_JOB_ID = "recalculate_all_risks"

    def __init__(self, engine, ticker: Optional[Ticker] = None, settings=None):
        self.engine = engine
        self.settings = settings or engine.settings
        self.ticker = ticker or APSchedulerTicker()
        self.is_running = False

    def start(self):
        """Register the jobs and start ticking."""
        if not self.is_running:
            self._add_jobs()
            self.ticker.start()
            self.is_running = True
            logger.info("Background scheduler started")

    def shutdown(self):
        """Stop ticking. Safe to call more than once."""
        if self.is_running:
            self.ticker.shutdown()
            self.is_running = False
            logger.info("Background scheduler stopped")

    def _add_jobs(self):
        """Define and add periodic jobs to the ticker."""
        # Job 1: Drift tick (every 30 seconds by default)
        self.ticker.add_job(
            self.update_predictions,
            self.settings.drift_interval_seconds,
            self.DRIFT_JOB_ID,
        )
        # Job 2: Recalculation tick (every 5 minutes by default)
        self.ticker.add_job(
            self.recalculate_risks,
            self.settings.recalculation_interval_seconds,
            self.RECALCULATION_JOB_ID,
        )

    def update_predictions(self):
        """Apply drift to every stored prediction."""
        try:
            self.engine.update_all_predictions()
        except Exception as e:
            logger.error(f"Job failed: {self.DRIFT_JOB_ID}: {e}")

    def recalculate_risks(self):
        """Run the recalculation placeholder."""
        try:
            self.engine.recalculate_all_risks()
        except Exception as e:
            logger.error(f"Job failed: {self.RECALCULATION_JOB_ID}: {e}")
