"""
Report kinds available on the GN reports dashboard.
"""

from django.db import models


class ReportKind(models.TextChoices):
    OVERVIEW = 'overview', 'Overview Dashboard'
    POPULATION = 'population', 'Population Statistics'
    FAMILY = 'family', 'Family Statistics'
    DEMOGRAPHIC = 'demographic', 'Demographic Analysis'
    EDUCATION = 'education', 'Education Statistics'
    EMPLOYMENT = 'employment', 'Employment Statistics'
    HEALTH = 'health', 'Health Statistics'
    AGE = 'age', 'Age Distribution'
    GENDER = 'gender', 'Gender Analysis'
    MONTHLY = 'monthly', 'Monthly Report'


# Bootstrap icon names (without the "bi-" prefix)
REPORT_ICONS = {
    ReportKind.OVERVIEW: 'speedometer2',
    ReportKind.POPULATION: 'people',
    ReportKind.FAMILY: 'house-door',
    ReportKind.DEMOGRAPHIC: 'globe2',
    ReportKind.EDUCATION: 'mortarboard',
    ReportKind.EMPLOYMENT: 'briefcase',
    ReportKind.HEALTH: 'heart-pulse',
    ReportKind.AGE: 'calendar',
    ReportKind.GENDER: 'gender-ambiguous',
    ReportKind.MONTHLY: 'calendar-month',
}


def resolve_kind(key):
    """Exact, case-sensitive lookup; anything unknown is the overview."""
    if key in ReportKind.values:
        return ReportKind(key)
    return ReportKind.OVERVIEW


def report_title(key):
    return resolve_kind(key).label


# Chart.js chart type per report
REPORT_CHART_TYPES = {
    ReportKind.OVERVIEW: 'line',
    ReportKind.POPULATION: 'pyramid',
    ReportKind.FAMILY: 'bar',
    ReportKind.DEMOGRAPHIC: 'doughnut',
    ReportKind.EDUCATION: 'bar',
    ReportKind.EMPLOYMENT: 'doughnut',
    ReportKind.HEALTH: 'pie',
    ReportKind.AGE: 'pyramid',
    ReportKind.GENDER: 'pie',
    ReportKind.MONTHLY: 'bar',
}
