# statwatch/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .core.exceptions import ConfigurationError

DEFAULT_STATS_URL = "http://srv.msk01.gigacorp.local/_stats"

@dataclass
class ProbeConfig:
    """
    Stats probe configuration

    Attributes:
        url: Stats endpoint polled every cycle
        poll_interval: Seconds to sleep between cycles
        request_timeout: Total seconds allowed for one request (connect + read)
        max_consecutive_failures: Failed polls in a row before the unavailable notice
    """
    url: str = DEFAULT_STATS_URL
    poll_interval: float = 10.0
    request_timeout: float = 5.0
    max_consecutive_failures: int = 3

    def __post_init__(self) -> None:
        """Validate probe configuration"""
        if not self.url:
            raise ConfigurationError("Stats URL must be specified")
        if self.poll_interval <= 0:
            raise ConfigurationError("Poll interval must be positive")
        if self.request_timeout <= 0:
            raise ConfigurationError("Request timeout must be positive")
        if self.max_consecutive_failures <= 0:
            raise ConfigurationError("Failure limit must be positive")

class Config:
    """Application configuration"""

    def __init__(self):
        # Load environment variables
        load_dotenv()

        self.probe = self._init_probe_config()

    def _init_probe_config(self) -> ProbeConfig:
        """Initialize probe configuration"""
        try:
            return ProbeConfig(
                url=os.getenv('STATWATCH_URL', DEFAULT_STATS_URL),
                poll_interval=float(os.getenv('STATWATCH_POLL_INTERVAL', '10')),
                request_timeout=float(os.getenv('STATWATCH_REQUEST_TIMEOUT', '5')),
                max_consecutive_failures=int(os.getenv('STATWATCH_MAX_FAILURES', '3'))
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid probe configuration: {e}")
