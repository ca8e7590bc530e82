import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from statwatch.core.models import StatsRecord


@pytest.fixture
def normal_record():
    """Reading with every metric well under its threshold"""
    return StatsRecord(
        load_average=5.0,
        total_memory=1000,
        used_memory=100,
        total_disk=1000,
        used_disk=100,
        total_net_capacity=1000,
        used_net_capacity=100
    )
