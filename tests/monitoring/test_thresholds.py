# tests/monitoring/test_thresholds.py
import dataclasses
import io
import pytest

from statwatch.core.models import StatsRecord
from statwatch.core.parser import parse_stats
from statwatch.monitoring.thresholds import ThresholdChecker, ResourceThresholds, format_load, mebibytes

@pytest.fixture
def checker():
    return ThresholdChecker()

def test_normal_reading_emits_nothing(checker, normal_record, capsys):
    assert checker.check(normal_record) == []
    assert capsys.readouterr().out == ""

def test_high_load(checker, capsys):
    record = parse_stats("35.5,1000,100,1000,100,1000,100")

    warnings = checker.check(record)

    assert warnings == ["Load Average is too high: 35.5"]
    assert capsys.readouterr().out == "Load Average is too high: 35.5\n"

def test_high_memory(checker):
    record = parse_stats("5.0,1000,850,1000,100,1000,100")
    assert checker.evaluate(record) == ["Memory usage too high: 85%"]

def test_low_disk(checker):
    record = parse_stats("5.0,1000,100,1048576000,1000000000,1000,100")
    assert checker.evaluate(record) == ["Free disk space is too low: 46 Mb left"]

def test_high_network(checker):
    # 1 Gbit/s link with 40 Mbit/s to spare
    record = parse_stats("5.0,1000,100,1000,100,125000000,120000000")
    assert checker.evaluate(record) == ["Network bandwidth usage high: 40.00 Mbit/s available"]

def test_all_rules_fire_in_order(checker, capsys):
    record = StatsRecord(
        load_average=42.0,
        total_memory=1000,
        used_memory=990,
        total_disk=10 * 1024 * 1024 * 1024,
        used_disk=10 * 1024 * 1024 * 1024 - 512 * 1024 * 1024,
        total_net_capacity=1_000_000,
        used_net_capacity=999_000
    )

    checker.check(record)

    assert capsys.readouterr().out.splitlines() == [
        "Load Average is too high: 42",
        "Memory usage too high: 99%",
        "Free disk space is too low: 512 Mb left",
        "Network bandwidth usage high: 0.01 Mbit/s available",
    ]

@pytest.mark.parametrize("body", [
    "30.0,1000,800,1000,900,1000,900",
    "30,1,0,1,0,1,0",
])
def test_thresholds_are_strict(checker, body):
    assert checker.evaluate(parse_stats(body)) == []

@pytest.mark.parametrize("changes", [
    {'total_memory': 0, 'used_memory': 5000},
    {'total_disk': 0, 'used_disk': 10 ** 12},
    {'total_net_capacity': 0, 'used_net_capacity': 10 ** 9},
])
def test_zero_total_skips_rule(checker, normal_record, changes):
    record = dataclasses.replace(normal_record, **changes)
    assert checker.evaluate(record) == []

def test_evaluate_is_pure(checker):
    record = parse_stats("31.0,100,95,100,95,100,95")
    snapshot = dataclasses.asdict(record)

    first = checker.evaluate(record)
    second = checker.evaluate(record)

    assert first == second
    assert len(first) == 4
    assert dataclasses.asdict(record) == snapshot

def test_custom_output_stream(normal_record, capsys):
    stream = io.StringIO()
    checker = ThresholdChecker(output=stream)

    checker.check(dataclasses.replace(normal_record, load_average=99.25))

    assert stream.getvalue() == "Load Average is too high: 99.25\n"
    assert capsys.readouterr().out == ""

def test_default_thresholds():
    assert ResourceThresholds.LOAD_AVERAGE == 30.0
    assert ResourceThresholds.MEMORY_USAGE == 0.80
    assert ResourceThresholds.DISK_USAGE == 0.90
    assert ResourceThresholds.NET_USAGE == 0.90

@pytest.mark.parametrize("value, text", [
    (35.5, "35.5"),
    (42.0, "42"),
    (30.125, "30.125"),
    (0.1, "0.1"),
    (123456.0, "123456"),
    (1234567.0, "1.234567e+06"),
    (1e21, "1e+21"),
    (0.00001, "1e-05"),
    (0.0001, "0.0001"),
    (-2.5, "-2.5"),
    (0.0, "0"),
    (float("inf"), "+Inf"),
    (float("-inf"), "-Inf"),
    (float("nan"), "NaN"),
])
def test_format_load(value, text):
    assert format_load(value) == text

def test_large_load_uses_exponent_form(checker):
    record = parse_stats("1234567,1000,100,1000,100,1000,100")
    assert checker.evaluate(record) == ["Load Average is too high: 1.234567e+06"]

def test_disk_used_beyond_total(checker):
    record = parse_stats("1.0,1,0,1048576,3145729,1,0")
    assert checker.evaluate(record) == ["Free disk space is too low: -2 Mb left"]

@pytest.mark.parametrize("size, expected", [
    (0, 0),
    (1048575, 0),
    (1048576, 1),
    (48576000, 46),
    (-1, 0),
    (-2097153, -2),
    (-3145728, -3),
])
def test_mebibytes_truncates_toward_zero(size, expected):
    assert mebibytes(size) == expected
