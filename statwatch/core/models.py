# statwatch/core/models.py

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class StatsRecord:
    """
    One reading from the stats endpoint.

    Attributes:
        load_average: Host load average
        total_memory: Installed memory in bytes
        used_memory: Memory in use in bytes
        total_disk: Disk capacity in bytes
        used_disk: Disk space in use in bytes
        total_net_capacity: Network capacity in bytes/sec
        used_net_capacity: Network throughput in use in bytes/sec
    """
    load_average: float
    total_memory: int
    used_memory: int
    total_disk: int
    used_disk: int
    total_net_capacity: int
    used_net_capacity: int

    @staticmethod
    def _ratio(used: int, total: int) -> Optional[float]:
        if total <= 0:
            return None
        return used / total

    @property
    def memory_usage(self) -> Optional[float]:
        """Used/total memory, None when total is zero"""
        return self._ratio(self.used_memory, self.total_memory)

    @property
    def disk_usage(self) -> Optional[float]:
        """Used/total disk, None when total is zero"""
        return self._ratio(self.used_disk, self.total_disk)

    @property
    def net_usage(self) -> Optional[float]:
        """Used/total network capacity, None when total is zero"""
        return self._ratio(self.used_net_capacity, self.total_net_capacity)

    @property
    def free_disk_bytes(self) -> int:
        return self.total_disk - self.used_disk

    @property
    def free_net_capacity(self) -> int:
        return self.total_net_capacity - self.used_net_capacity
