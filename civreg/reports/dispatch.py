"""
Report kind -> (statistics query, chart query) dispatch table.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Union

from django.core.exceptions import ImproperlyConfigured

from .kinds import ReportKind

logger = logging.getLogger('civreg.reports')


class ReportQueries(NamedTuple):
    stats: Callable
    chart: Callable


REPORT_QUERIES = {
    ReportKind.OVERVIEW: ReportQueries(
        lambda gen, gn_id, req: gen.overview_stats(gn_id),
        lambda gen, gn_id, req: gen.monthly_registration_trend(gn_id, req.year),
    ),
    ReportKind.POPULATION: ReportQueries(
        lambda gen, gn_id, req: gen.population_stats(gn_id),
        lambda gen, gn_id, req: gen.population_pyramid(gn_id),
    ),
    ReportKind.FAMILY: ReportQueries(
        lambda gen, gn_id, req: gen.family_stats(gn_id),
        lambda gen, gn_id, req: gen.family_size_distribution(gn_id),
    ),
    ReportKind.DEMOGRAPHIC: ReportQueries(
        lambda gen, gn_id, req: gen.demographic_stats(gn_id),
        lambda gen, gn_id, req: gen.religion_distribution(gn_id),
    ),
    ReportKind.EDUCATION: ReportQueries(
        lambda gen, gn_id, req: gen.education_stats(gn_id),
        lambda gen, gn_id, req: gen.education_level_distribution(gn_id),
    ),
    ReportKind.EMPLOYMENT: ReportQueries(
        lambda gen, gn_id, req: gen.employment_stats(gn_id),
        lambda gen, gn_id, req: gen.employment_type_distribution(gn_id),
    ),
    ReportKind.HEALTH: ReportQueries(
        lambda gen, gn_id, req: gen.health_stats(gn_id),
        lambda gen, gn_id, req: gen.health_condition_distribution(gn_id),
    ),
    ReportKind.AGE: ReportQueries(
        lambda gen, gn_id, req: gen.age_group_stats(gn_id),
        lambda gen, gn_id, req: gen.age_group_distribution(gn_id),
    ),
    ReportKind.GENDER: ReportQueries(
        lambda gen, gn_id, req: gen.gender_stats(gn_id),
        lambda gen, gn_id, req: gen.gender_ratio_chart(gn_id),
    ),
    ReportKind.MONTHLY: ReportQueries(
        lambda gen, gn_id, req: gen.monthly_report(gn_id, req.year, req.month),
        lambda gen, gn_id, req: gen.monthly_comparison(gn_id, req.year, req.month),
    ),
}

_missing = [kind.value for kind in ReportKind if kind not in REPORT_QUERIES]
if _missing:
    raise ImproperlyConfigured(f"No report queries registered for: {', '.join(_missing)}")


def table_rows(report_data):
    """(category, entry) pairs for entries that carry a count; everything else is skipped."""
    if not isinstance(report_data, Mapping):
        return []
    return [
        (category, entry)
        for category, entry in report_data.items()
        if isinstance(entry, Mapping) and entry.get('count') is not None
    ]


def has_chart(chart_data):
    return isinstance(chart_data, (Mapping, list)) and bool(chart_data)


@dataclass(frozen=True)
class ReportResult:
    report_data: dict = field(default_factory=dict)
    chart_data: Union[dict, list] = field(default_factory=list)

    @property
    def rows(self):
        return table_rows(self.report_data)

    @property
    def has_chart(self):
        return has_chart(self.chart_data)


def dispatch(generator, gn_id, report_request):
    """Run the statistics and chart queries for the request's report kind."""
    kind = report_request.kind
    queries = REPORT_QUERIES[kind]
    logger.debug(f"Dispatching {kind.value} report for {gn_id}")
    return ReportResult(
        report_data=queries.stats(generator, gn_id, report_request),
        chart_data=queries.chart(generator, gn_id, report_request),
    )


def report_payload(generator, gn_id, report_request):
    """Plain data form of a report, used for exports."""
    result = dispatch(generator, gn_id, report_request)
    return {
        'report_type': report_request.kind.value,
        'gn_id': gn_id,
        'year': report_request.year,
        'month': report_request.month,
        'data': result.report_data,
        'generated_at': generator.now.strftime('%Y-%m-%d %H:%M:%S'),
    }
