import pytest

from quantgrades.loglevel import LogLevel, parse_log_level, to_string


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.TRACE, "TRACE"),
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARN, "WARN"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.CRITICAL, "CRITICAL"),
        (LogLevel.OFF, "OFF"),
    ],
)
def test_to_string(level, name):
    assert to_string(level) == name
    assert str(level) == name


def test_levels_are_ordered():
    ordered = sorted(parse_log_level(name) for name in ["off", "info", "trace", "warn", "debug"])
    assert ordered[0] is LogLevel.TRACE
    assert ordered[-1] is LogLevel.OFF
    assert parse_log_level("debug") < parse_log_level("info") < parse_log_level("warn")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("trace", LogLevel.TRACE),
        ("DEBUG", LogLevel.DEBUG),
        ("Info", LogLevel.INFO),
        ("warn", LogLevel.WARN),
        ("Warning", LogLevel.WARN),
        ("err", LogLevel.ERROR),
        ("ERROR", LogLevel.ERROR),
        ("critical", LogLevel.CRITICAL),
        ("crit", LogLevel.CRITICAL),
        ("off", LogLevel.OFF),
        ("none", LogLevel.OFF),
    ],
)
def test_parse_known(text, expected):
    warnings = []
    assert parse_log_level(text, warnings) is expected
    assert warnings == []


def test_parse_round_trip():
    for level in LogLevel:
        assert parse_log_level(to_string(level)) is level


def test_parse_unknown_records_warning():
    warnings = []
    assert parse_log_level("BoGuS", warnings) is None
    assert len(warnings) == 1
    assert warnings[0].startswith("logging.level: unknown value")
    assert "'bogus'" in warnings[0]


def test_parse_unknown_without_warnings_list():
    assert parse_log_level("verbose") is None