# statwatch/adapters/stats_endpoint.py

import asyncio
from typing import Optional
import aiohttp

from ..config import ProbeConfig
from ..core.exceptions import ReadError, TransportError, UnexpectedStatus
from ..core.models import StatsRecord
from ..core.parser import parse_stats
from ..utils.logger import LoggerSetup


def _describe(error: BaseException) -> str:
    # asyncio timeouts carry no message
    return str(error) or error.__class__.__name__


class StatsEndpointAdapter:
    """
    Async client for the plain-text stats endpoint using aiohttp.

    One GET per call, bounded by a total timeout, no retries: the poll
    interval is the retry delay. The session is kept between calls so
    connections can be reused.
    """

    def __init__(self, config: Optional[ProbeConfig] = None):
        self._config = config or ProbeConfig()
        self._session: Optional[aiohttp.ClientSession] = None

        self.logger = LoggerSetup.setup(__class__.__name__)

    async def _create_session(self) -> aiohttp.ClientSession:
        """Create new session with the probe timeout"""
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self._config.request_timeout),
            headers={'Accept': 'text/plain'}
        )

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = await self._create_session()
        return self._session

    async def fetch_body(self, url: str) -> str:
        """
        GET the endpoint and return the decoded body.

        Raises:
            TransportError: Request could not complete
            UnexpectedStatus: Response status is not 200
            ReadError: Body could not be read
        """
        session = await self._get_session()

        try:
            async with session.get(url) as response:
                if response.status != 200:
                    raise UnexpectedStatus(response.status)

                try:
                    body = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    raise ReadError(f"failed to read response body: {_describe(e)}") from e

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"HTTP GET failed: {_describe(e)}") from e

        self.logger.debug(f"Received {len(body)} bytes from {url}")
        return body.decode('utf-8', errors='replace')

    async def fetch(self, url: Optional[str] = None) -> StatsRecord:
        """
        Fetch and parse one stats reading.

        Args:
            url: Endpoint to poll, defaults to the configured one

        Returns:
            StatsRecord: Parsed reading

        Raises:
            FetchError: Any transport, status, read, format or parse failure
        """
        body = await self.fetch_body(url or self._config.url)
        return parse_stats(body)

    async def close(self) -> None:
        """Close the underlying session"""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> 'StatsEndpointAdapter':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
