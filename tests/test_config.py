# tests/test_config.py
import pytest
from unittest.mock import patch

from statwatch.config import Config, ProbeConfig, DEFAULT_STATS_URL
from statwatch.core.exceptions import ConfigurationError

class TestProbeConfig:
    def test_default_config(self):
        config = ProbeConfig()
        assert config.url == DEFAULT_STATS_URL
        assert config.poll_interval == 10.0
        assert config.request_timeout == 5.0
        assert config.max_consecutive_failures == 3

    @pytest.mark.parametrize("overrides", [
        {'url': ''},
        {'poll_interval': 0},
        {'request_timeout': -1},
        {'max_consecutive_failures': 0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError):
            ProbeConfig(**overrides)

class TestConfig:
    @pytest.fixture(autouse=True)
    def no_dotenv(self):
        with patch('statwatch.config.load_dotenv'):
            yield

    def test_defaults_without_environment(self, monkeypatch):
        for name in ('STATWATCH_URL', 'STATWATCH_POLL_INTERVAL',
                     'STATWATCH_REQUEST_TIMEOUT', 'STATWATCH_MAX_FAILURES'):
            monkeypatch.delenv(name, raising=False)

        assert Config().probe == ProbeConfig()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv('STATWATCH_URL', 'http://10.0.0.5:8080/_stats')
        monkeypatch.setenv('STATWATCH_POLL_INTERVAL', '2.5')
        monkeypatch.setenv('STATWATCH_REQUEST_TIMEOUT', '1')
        monkeypatch.setenv('STATWATCH_MAX_FAILURES', '5')

        probe = Config().probe

        assert probe.url == 'http://10.0.0.5:8080/_stats'
        assert probe.poll_interval == 2.5
        assert probe.request_timeout == 1.0
        assert probe.max_consecutive_failures == 5

    def test_unparseable_environment(self, monkeypatch):
        monkeypatch.setenv('STATWATCH_MAX_FAILURES', 'three')

        with pytest.raises(ConfigurationError, match="Invalid probe configuration"):
            Config()
