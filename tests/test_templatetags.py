from datetime import date, datetime, timedelta

import pytest
from django.utils import timezone

from civreg.registry.templatetags.date_filters import (
    registry_date, registry_datetime, registry_month_year, time_ago,
)
from civreg.reports.templatetags.report_tags import absolute, stat_table, trend_class, trend_icon


def test_time_ago():
    now = timezone.now()

    assert time_ago(now - timedelta(seconds=30), now) == 'just now'
    assert time_ago(now - timedelta(hours=2, minutes=5), now).replace('\xa0', ' ') == '2 hours ago'
    assert time_ago(now - timedelta(days=3, hours=4), now).replace('\xa0', ' ') == '3 days ago'
    assert time_ago(None) == ''


def test_date_filters():
    assert registry_date(date(2026, 2, 16)) == '16 Feb 2026'
    assert registry_month_year(date(2024, 3, 1)) == 'March 2024'
    assert registry_datetime(None) == ''
    assert registry_datetime(datetime(2026, 2, 16, 14, 30)) == '16 Feb 2026, 02:30 PM'


@pytest.mark.parametrize('trend, icon, css', [
    (12.5, 'arrow-up', 'text-success'),
    (-4, 'arrow-down', 'text-danger'),
    (0, 'dash', 'text-muted'),
    (None, '', 'text-muted'),
])
def test_trend_filters(trend, icon, css):
    assert trend_icon(trend) == icon
    assert trend_class(trend) == css


def test_absolute():
    assert absolute(-5.5) == 5.5
    assert absolute('n/a') == 'n/a'


def test_stat_table_context_is_rows_only():
    rows = [('Male', {'count': 2, 'percentage': 50.0, 'trend': None})]
    assert stat_table(rows) == {'rows': rows}
