from __future__ import annotations

import logging
from itertools import combinations

import pytest

from lib_log_colors.domain.levels import Severity, register_level_names


ORDER = ["trace", "debug", "info", "notice", "warning", "error", "critical"]


def test_severity_enumeration_follows_fixed_order() -> None:
    assert [severity.severity for severity in Severity] == ORDER


def test_critical_is_more_serious_than_error() -> None:
    assert Severity.CRITICAL > Severity.ERROR


@pytest.mark.parametrize("lower, higher", list(combinations(list(Severity), 2)))
def test_ordering_is_total_and_consistent(lower: Severity, higher: Severity) -> None:
    assert lower < higher
    assert lower <= higher
    assert higher > lower
    assert higher >= lower
    assert lower != higher


def test_sorting_restores_enumeration_order() -> None:
    assert sorted(reversed(list(Severity))) == list(Severity)


def test_comparison_with_foreign_types_is_rejected() -> None:
    with pytest.raises(TypeError):
        Severity.INFO < 20  # noqa: B015


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", Severity.TRACE),
        ("DEBUG", Severity.DEBUG),
        ("Notice", Severity.NOTICE),
        (" warning ", Severity.WARNING),
        ("CRITICAL", Severity.CRITICAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: Severity) -> None:
    assert Severity.from_name(name) is expected


def test_from_name_rejects_unknown_severity() -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        Severity.from_name("verbose")


@pytest.mark.parametrize("number", [-5, 0, 15, 35, 55])
def test_from_numeric_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported severity numeric"):
        Severity.from_numeric(number)


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.NOTSET, Severity.TRACE),
        (5, Severity.TRACE),
        (logging.DEBUG, Severity.DEBUG),
        (15, Severity.DEBUG),
        (logging.INFO, Severity.INFO),
        (25, Severity.NOTICE),
        (logging.WARNING, Severity.WARNING),
        (logging.ERROR, Severity.ERROR),
        (logging.CRITICAL, Severity.CRITICAL),
        (99, Severity.CRITICAL),
    ],
)
def test_from_python_level_rounds_down(level: int, expected: Severity) -> None:
    assert Severity.from_python_level(level) is expected


@pytest.mark.parametrize("severity", list(Severity))
def test_python_level_round_trip(severity: Severity) -> None:
    assert Severity.from_python_level(severity.to_python_level()) is severity


def test_register_level_names_teaches_logging_extra_levels() -> None:
    register_level_names()
    assert logging.getLevelName(5) == "TRACE"
    assert logging.getLevelName(25) == "NOTICE"
    assert logging.getLevelName(logging.INFO) == "INFO"
