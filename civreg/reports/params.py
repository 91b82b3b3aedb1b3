"""
Query-string normalization for report pages.
"""

import math
import re
from dataclasses import dataclass
from datetime import date

from django.conf import settings
from django.utils import timezone
from django.utils.dateformat import format as date_format
from django.utils.http import urlencode

from .kinds import ReportKind, report_title, resolve_kind

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def to_int(value):
    """
    Leading-integer parse of a raw query value.

    "2024" -> 2024, "12abc" -> 12, "abc" / "" / None -> 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value)
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def sanitize_number(value, minimum=None, maximum=None):
    """Parse ``value`` as an integer and clamp it into [minimum, maximum]."""
    number = to_int(value)
    if minimum is not None and number < minimum:
        number = minimum
    if maximum is not None and number > maximum:
        number = maximum
    return number


def current_quarter(month):
    return math.ceil(month / 3)


@dataclass(frozen=True)
class ReportRequest:
    """
    Normalized report parameters.

    ``report_type`` is kept exactly as received; it is only interpreted
    through ``kind``, which falls back to the overview.
    """

    report_type: str
    year: int
    month: int
    quarter: int

    @classmethod
    def from_query(cls, query, today=None):
        today = today or timezone.localdate()
        first_year, last_year = settings.REPORT_YEAR_RANGE

        return cls(
            report_type=query.get('report', ReportKind.OVERVIEW.value),
            year=sanitize_number(query.get('year', today.year), first_year, last_year),
            month=sanitize_number(query.get('month', today.month), 1, 12),
            quarter=sanitize_number(query.get('quarter', current_quarter(today.month)), 1, 4),
        )

    @property
    def kind(self):
        return resolve_kind(self.report_type)

    @property
    def title(self):
        return report_title(self.report_type)

    @property
    def is_monthly(self):
        return self.report_type == ReportKind.MONTHLY

    @property
    def period_label(self):
        if self.is_monthly:
            return date_format(date(self.year, self.month, 1), 'F Y')
        return f"Year: {self.year} | Q{self.quarter}"

    @property
    def querystring(self):
        return urlencode({
            'report': self.report_type,
            'year': self.year,
            'month': self.month,
            'quarter': self.quarter,
        })
