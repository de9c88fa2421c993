import logging
from datetime import date
from typing import Callable, Optional

from apscheduler.jobstores.base import JobLookupError

from .clock import Clock, date_key, next_midnight, system_clock

logger = logging.getLogger(__name__)


class DayRollover:
    """Fire ``on_rollover(new_day)`` at each local midnight.

    ``scheduler`` is anything with APScheduler's ``add_job(func, "date",
    run_date=..., args=...)`` returning a job with ``remove()``. Only one job
    is pending at a time; ``cancel`` removes it and a job that fires for a day
    other than the one it was armed for does nothing.
    """

    def __init__(self, scheduler, on_rollover: Callable[[date], None], clock: Clock = system_clock):
        self.scheduler = scheduler
        self.on_rollover = on_rollover
        self.clock = clock
        self._job = None
        self._armed_key: Optional[str] = None

    @property
    def armed_for(self) -> Optional[str]:
        return self._armed_key

    def start(self):
        self.cancel()
        self._arm()

    def cancel(self):
        job, self._job = self._job, None
        self._armed_key = None
        if job is not None:
            try:
                job.remove()
            except JobLookupError:
                pass  # already ran

    def _arm(self):
        run_at = next_midnight(self.clock())
        key = date_key(run_at)
        self._armed_key = key
        self._job = self.scheduler.add_job(self._fire, "date", run_date=run_at, args=[key])
        logger.debug("Day rollover armed for %s", run_at.isoformat())

    def _fire(self, key: str):
        if key != self._armed_key:
            logger.debug("Ignoring stale rollover for %s", key)
            return
        self._job = None
        logger.info("Day rolled over to %s", key)
        try:
            self.on_rollover(date.fromisoformat(key))
        finally:
            self._arm()
