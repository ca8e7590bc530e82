# statwatch/services/poller.py

import asyncio
import sys
from typing import Optional, TextIO

from ..adapters.stats_endpoint import StatsEndpointAdapter
from ..config import ProbeConfig
from ..core.exceptions import FetchError
from ..monitoring.thresholds import ThresholdChecker
from ..utils.logger import LoggerSetup

UNAVAILABLE_NOTICE = "Unable to fetch server statistic."


class StatsPoller:
    """
    Poll the stats endpoint forever and report threshold breaches.

    Each cycle fetches one reading, checks it and sleeps for the poll
    interval. Failed polls are reported on the error stream; once
    ``max_consecutive_failures`` polls in a row have failed, every further
    failing cycle also prints the unavailable notice on standard output.
    """

    def __init__(self,
                 config: Optional[ProbeConfig] = None,
                 adapter: Optional[StatsEndpointAdapter] = None,
                 checker: Optional[ThresholdChecker] = None,
                 output: Optional[TextIO] = None,
                 errors: Optional[TextIO] = None):
        self._config = config or ProbeConfig()
        self._adapter = adapter or StatsEndpointAdapter(self._config)
        self._checker = checker or ThresholdChecker(output)
        self._output = output
        self._errors = errors
        self._consecutive_failures = 0

        self.logger = LoggerSetup.setup(__class__.__name__)

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    def _report_failure(self, error: FetchError) -> None:
        attempt = self._consecutive_failures + 1
        print(f"Error (attempt {attempt}): {error}", file=self._errors or sys.stderr, flush=True)
        self._consecutive_failures = attempt

        self.logger.debug(f"Poll failed with {error.__class__.__name__}, {attempt} in a row")
        if self._consecutive_failures >= self._config.max_consecutive_failures:
            print(UNAVAILABLE_NOTICE, file=self._output or sys.stdout, flush=True)

    async def poll_once(self) -> bool:
        """
        Run one fetch and check.

        Returns:
            bool: True if a reading was fetched and checked
        """
        try:
            record = await self._adapter.fetch(self._config.url)
        except FetchError as e:
            self._report_failure(e)
            return False

        self._consecutive_failures = 0
        self._checker.check(record)
        return True

    async def run(self) -> None:
        """Poll until cancelled"""
        self.logger.info(
            f"Starting stats monitoring: {self._config.url} "
            f"(interval: {self._config.poll_interval:g}s)"
        )
        try:
            while True:
                await self.poll_once()
                await asyncio.sleep(self._config.poll_interval)
        finally:
            await self._adapter.close()
            self.logger.info("Stats monitoring stopped")
