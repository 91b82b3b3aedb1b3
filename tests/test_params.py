from datetime import date

import pytest

from civreg.reports.kinds import ReportKind, report_title, resolve_kind
from civreg.reports.params import ReportRequest, sanitize_number, to_int

TODAY = date(2024, 8, 20)


@pytest.mark.parametrize('raw, expected', [
    ('2024', 2024),
    ('12abc', 12),
    ('  7', 7),
    ('-3', -3),
    ('abc', 0),
    ('', 0),
    (None, 0),
    (5, 5),
    (4.9, 4),
])
def test_to_int(raw, expected):
    assert to_int(raw) == expected


def test_sanitize_number_clamps():
    assert sanitize_number('1999', 2020, 2030) == 2020
    assert sanitize_number('2099', 2020, 2030) == 2030
    assert sanitize_number('2025', 2020, 2030) == 2025
    assert sanitize_number('0', 1, 12) == 1
    assert sanitize_number('13', 1, 12) == 12
    assert sanitize_number('42') == 42


def test_from_query_defaults_to_today():
    request = ReportRequest.from_query({}, today=TODAY)

    assert request.report_type == 'overview'
    assert request.year == 2024
    assert request.month == 8
    assert request.quarter == 3


def test_from_query_clamps_out_of_range_values():
    request = ReportRequest.from_query(
        {'year': '1999', 'month': '15', 'quarter': '9'}, today=TODAY
    )
    assert (request.year, request.month, request.quarter) == (2020, 12, 4)

    request = ReportRequest.from_query({'year': '2099'}, today=TODAY)
    assert request.year == 2030


def test_from_query_empty_values_fall_to_minimum():
    request = ReportRequest.from_query(
        {'year': '', 'month': '', 'quarter': 'x'}, today=TODAY
    )
    assert (request.year, request.month, request.quarter) == (2020, 1, 1)


def test_unknown_report_type_is_kept_raw_but_resolves_to_overview():
    request = ReportRequest.from_query({'report': 'Population'}, today=TODAY)

    assert request.report_type == 'Population'
    assert request.kind == ReportKind.OVERVIEW
    assert request.title == 'Overview Dashboard'


def test_period_label():
    monthly = ReportRequest(report_type='monthly', year=2024, month=3, quarter=1)
    yearly = ReportRequest(report_type='gender', year=2024, month=3, quarter=1)

    assert monthly.period_label == 'March 2024'
    assert yearly.period_label == 'Year: 2024 | Q1'
    assert monthly.title == report_title('monthly') == 'Monthly Report'


def test_querystring_carries_normalized_values():
    request = ReportRequest(report_type='age', year=2023, month=5, quarter=2)
    assert request.querystring == 'report=age&year=2023&month=5&quarter=2'


def test_resolve_kind_is_exact_match():
    assert resolve_kind('health') == ReportKind.HEALTH
    assert resolve_kind('HEALTH') == ReportKind.OVERVIEW
    assert resolve_kind('') == ReportKind.OVERVIEW
    assert report_title('monthly') == 'Monthly Report'
    assert report_title('nope') == 'Overview Dashboard'
