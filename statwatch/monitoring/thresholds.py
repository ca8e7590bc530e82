# statwatch/monitoring/thresholds.py

import math
import sys
from decimal import Decimal
from typing import List, Optional, TextIO

from ..core.models import StatsRecord
from ..utils.logger import LoggerSetup

logger = LoggerSetup.setup(__name__)

BYTES_PER_MEBIBYTE = 1024 * 1024
BITS_PER_MEGABIT = 1_000_000

class ResourceThresholds:
    """Fixed warning thresholds"""
    LOAD_AVERAGE = 30.0
    MEMORY_USAGE = 0.80  # 80%
    DISK_USAGE = 0.90    # 90%
    NET_USAGE = 0.90     # 90%


def format_load(value: float) -> str:
    """
    Shortest round-trip digits in %g layout: exponent form when the decimal
    exponent is below -4 or at least 6 (1234567 -> 1.234567e+06).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    prefix = '-' if sign else ''
    point = len(digits) + exponent  # position of the decimal point in digits
    exp = point - 1

    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ('.' + digits[1:] if len(digits) > 1 else '')
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def mebibytes(size: int) -> int:
    """Whole MiB in a byte count, truncated toward zero"""
    whole = abs(size) // BYTES_PER_MEBIBYTE
    return -whole if size < 0 else whole


class ThresholdChecker:
    """Evaluate a stats record against the fixed thresholds"""

    def __init__(self, output: Optional[TextIO] = None):
        self._output = output

    def _check_load(self, record: StatsRecord) -> Optional[str]:
        if record.load_average > ResourceThresholds.LOAD_AVERAGE:
            return f"Load Average is too high: {format_load(record.load_average)}"
        return None

    def _check_memory(self, record: StatsRecord) -> Optional[str]:
        usage = record.memory_usage
        if usage is not None and usage > ResourceThresholds.MEMORY_USAGE:
            return f"Memory usage too high: {usage * 100:.0f}%"
        return None

    def _check_disk(self, record: StatsRecord) -> Optional[str]:
        usage = record.disk_usage
        if usage is not None and usage > ResourceThresholds.DISK_USAGE:
            free_mb = mebibytes(record.free_disk_bytes)
            return f"Free disk space is too low: {free_mb} Mb left"
        return None

    def _check_network(self, record: StatsRecord) -> Optional[str]:
        usage = record.net_usage
        if usage is not None and usage > ResourceThresholds.NET_USAGE:
            free_mbps = record.free_net_capacity * 8 / BITS_PER_MEGABIT
            return f"Network bandwidth usage high: {free_mbps:.2f} Mbit/s available"
        return None

    def evaluate(self, record: StatsRecord) -> List[str]:
        """
        Run every rule against the record.

        A rule whose total is zero is skipped. The record is not modified.

        Returns:
            List[str]: One line per rule that fired, in load, memory, disk, network order
        """
        results = [
            self._check_load(record),
            self._check_memory(record),
            self._check_disk(record),
            self._check_network(record),
        ]
        return [line for line in results if line is not None]

    def check(self, record: StatsRecord) -> List[str]:
        """Print a warning line for every rule that fires"""
        warnings = self.evaluate(record)
        output = self._output or sys.stdout
        for line in warnings:
            print(line, file=output, flush=True)

        if warnings:
            logger.debug(f"{len(warnings)} threshold(s) exceeded: {record}")
        return warnings
