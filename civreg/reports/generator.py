"""
Aggregate statistics for a single GN division.

Every query starts from ``families(gn_id)`` or ``citizens(gn_id)`` so no
report can read rows outside the division it was asked for.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from django.db.models import (
    Avg, Case, CharField, Count, F, FilteredRelation, OuterRef, Q, Subquery, Value, When,
)
from django.db.models.functions import ExtractMonth, TruncDate
from django.utils import timezone

from civreg.registry.models import Citizen, Education, Employment, Family, HealthCondition
from civreg.registry.templatetags.date_filters import time_ago

logger = logging.getLogger('civreg.reports')

MONTH_LABELS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

# (label, exclusive upper age bound)
AGE_GROUPS = [
    ('Infant (0)', 1),
    ('Toddler (1-5)', 6),
    ('Child (6-12)', 13),
    ('Teenager (13-19)', 20),
    ('Young Adult (20-35)', 36),
    ('Adult (36-60)', 61),
]
SENIOR_GROUP = 'Senior (60+)'

PYRAMID_BINS = [(f"{low}-{low + 4}", low + 5) for low in range(0, 60, 5)]
PYRAMID_TOP = '60+'

CHART_COLORS = [
    '#FF6384', '#36A2EB', '#FFCE56', '#4BC0C0', '#9966FF',
    '#FF9F40', '#8AC926', '#1982C4', '#6A4C93', '#F15BB5',
]


@dataclass
class QuickStats:
    total_families: int = 0
    total_population: int = 0
    avg_family_size: float = 0.0
    this_month_registrations: int = 0


@dataclass
class ActivityEntry:
    title: str
    description: str
    details: str
    time_ago: str
    created_at: Optional[datetime] = None


def stat(count, percentage=None, trend=None):
    return {'count': count, 'percentage': percentage, 'trend': trend}


def percent(part, total):
    if not total:
        return 0
    return round(part / total * 100, 1)


def growth_rate(current, previous):
    """Percentage change; a zero baseline gives 100 for any growth, else 0."""
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) / previous * 100, 1)


def previous_month(year, month):
    if month == 1:
        return year - 1, 12
    return year, month - 1


def years_ago(today, years):
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def ucfirst(value):
    value = str(value)
    return value[:1].upper() + value[1:]


def distribution(pairs):
    """Build ``{label: stat}`` from (label, count) pairs with share-of-total percentages."""
    counts = {}
    for label, count in pairs:
        counts[label] = counts.get(label, 0) + count

    total = sum(counts.values())
    return {label: stat(count, percent(count, total)) for label, count in counts.items()}


def doughnut(pairs, label=None):
    pairs = list(pairs)
    dataset = {
        'data': [count for _, count in pairs],
        'backgroundColor': CHART_COLORS[:len(pairs)] or CHART_COLORS[:1],
    }
    if label:
        dataset['label'] = label
    return {'labels': [name for name, _ in pairs], 'datasets': [dataset]}


def education_label(level):
    if level is None:
        return 'No Education'
    if level in Education.Level.values:
        return Education.Level(level).label
    return ucfirst(level)


def employment_label(employment_type, missing='Not Employed'):
    if employment_type is None:
        return missing
    if employment_type in Employment.EmploymentType.values:
        return Employment.EmploymentType(employment_type).label
    return ucfirst(employment_type)


def condition_label(condition_type, missing='No Conditions'):
    if condition_type is None:
        return missing
    if condition_type in HealthCondition.ConditionType.values:
        return HealthCondition.ConditionType(condition_type).label
    return ucfirst(condition_type)


class ReportGenerator:
    """
    Statistics and chart series for the reports dashboard.

    ``now`` pins the clock for age buckets, "this month" counts and
    activity ages; it defaults to the current time.
    """

    def __init__(self, now=None):
        self.now = now or timezone.now()
        self.today = timezone.localdate(self.now) if timezone.is_aware(self.now) else self.now.date()

    # Scoped base querysets

    def families(self, gn_id):
        return Family.objects.filter(gn_id=gn_id)

    def citizens(self, gn_id):
        return Citizen.objects.filter(family__gn_id=gn_id)

    def _grouped(self, queryset, field, distinct=False):
        """(value, count) rows grouped on ``field`` with the default ordering cleared."""
        rows = (
            queryset.values(field)
            .annotate(count=Count('id', distinct=distinct))
            .order_by()
        )
        return [(row[field], row['count']) for row in rows]

    def _age_case(self, groups, default):
        whens = [
            When(date_of_birth__gt=years_ago(self.today, upper), then=Value(label))
            for label, upper in groups
        ]
        return Case(*whens, default=Value(default), output_field=CharField())

    # Growth helpers

    def _count_for_month(self, kind, gn_id, year, month):
        if kind == 'families':
            queryset = self.families(gn_id)
        elif kind in ('citizens', 'population'):
            queryset = self.citizens(gn_id)
        else:
            return 0
        return queryset.filter(created_at__year=year, created_at__month=month).count()

    def _current_count(self, kind, gn_id):
        if kind == 'families':
            return self.families(gn_id).count()
        if kind == 'population':
            return self.citizens(gn_id).count()
        if kind == 'family_size':
            return self.families(gn_id).aggregate(avg=Avg('total_members'))['avg'] or 0
        if kind == 'income':
            average = self._current_jobs(gn_id).aggregate(avg=Avg('monthly_income'))['avg']
            return float(average or 0)
        return 0

    def _growth_rate(self, kind, gn_id):
        """Current total against last month's registrations of the same kind."""
        year, month = previous_month(self.today.year, self.today.month)
        return growth_rate(
            self._current_count(kind, gn_id),
            self._count_for_month(kind, gn_id, year, month),
        )

    def _monthly_trend(self, kind, gn_id, year, month):
        prev_year, prev_month = previous_month(year, month)
        return growth_rate(
            self._count_for_month(kind, gn_id, year, month),
            self._count_for_month(kind, gn_id, prev_year, prev_month),
        )

    def _this_month_registrations(self, gn_id):
        return self._count_for_month('families', gn_id, self.today.year, self.today.month)

    def _current_jobs(self, gn_id):
        return Employment.objects.filter(citizen__in=self.citizens(gn_id), is_current_job=True)

    # Statistics

    def overview_stats(self, gn_id):
        total_families = self.families(gn_id).count()
        total_population = self.citizens(gn_id).count()
        avg_size = self.families(gn_id).aggregate(avg=Avg('total_members'))['avg'] or 0

        genders = self.citizens(gn_id).aggregate(
            male=Count('id', filter=Q(gender=Citizen.Gender.MALE)),
            female=Count('id', filter=Q(gender=Citizen.Gender.FEMALE)),
            other=Count('id', filter=Q(gender=Citizen.Gender.OTHER)),
        )
        gendered = sum(genders.values())

        return {
            'total_families': stat(total_families, 100, self._growth_rate('families', gn_id)),
            'total_population': stat(total_population, 100, self._growth_rate('population', gn_id)),
            'avg_family_size': stat(round(avg_size, 1), None, self._growth_rate('family_size', gn_id)),
            'male_population': stat(genders['male'], percent(genders['male'], gendered)),
            'female_population': stat(genders['female'], percent(genders['female'], gendered)),
            'this_month_registrations': stat(self._this_month_registrations(gn_id)),
        }

    def population_stats(self, gn_id):
        stats = distribution(
            (gender, count)
            for gender, count in self._grouped(self.citizens(gn_id), 'gender')
        )
        stats.update(self.age_group_stats(gn_id))
        return stats

    def age_group_stats(self, gn_id):
        queryset = self.citizens(gn_id).annotate(
            age_group=self._age_case(AGE_GROUPS, SENIOR_GROUP)
        )
        counts = dict(self._grouped(queryset, 'age_group'))
        ordered = [label for label, _ in AGE_GROUPS] + [SENIOR_GROUP]
        return distribution((label, counts[label]) for label in ordered if label in counts)

    def family_stats(self, gn_id):
        sizes = sorted(self._grouped(self.families(gn_id), 'total_members'))
        stats = distribution((f"Family Size {size}", count) for size, count in sizes)

        statuses = self._grouped(self.citizens(gn_id), 'marital_status')
        stats.update(distribution(
            (f"Marital: {ucfirst('Not specified' if status is None else status)}", count)
            for status, count in statuses
        ))
        return stats

    def demographic_stats(self, gn_id):
        stats = {}
        for field, prefix in (('religion', 'Religion'), ('ethnicity', 'Ethnicity')):
            rows = sorted(self._grouped(self.citizens(gn_id), field), key=lambda row: -row[1])
            stats.update(distribution(
                (f"{prefix}: {'Not specified' if value is None else value}", count) for value, count in rows
            ))
        return stats

    def _education_rows(self, gn_id):
        rows = self._grouped(
            self.citizens(gn_id), 'education_records__education_level', distinct=True
        )
        ranking = {level.value: rank for rank, level in enumerate(Education.Level.ranked())}
        return sorted(rows, key=lambda row: ranking.get(row[0], len(ranking)))

    def education_stats(self, gn_id):
        rows = self._education_rows(gn_id)
        stats = distribution((education_label(level), count) for level, count in rows)

        total = sum(count for _, count in rows)
        students = Education.objects.filter(
            citizen__in=self.citizens(gn_id), is_current=True
        ).count()
        stats['Current Students'] = stat(students, percent(students, total))
        return stats

    def _employment_rows(self, gn_id):
        queryset = self.citizens(gn_id).annotate(
            current_job=FilteredRelation(
                'employment_records',
                condition=Q(employment_records__is_current_job=True),
            )
        )
        return self._grouped(queryset, 'current_job__employment_type', distinct=True)

    def employment_stats(self, gn_id):
        stats = distribution(
            (employment_label(kind), count) for kind, count in self._employment_rows(gn_id)
        )

        average = self._current_jobs(gn_id).filter(monthly_income__gt=0).aggregate(
            avg=Avg('monthly_income')
        )['avg']
        stats['Average Monthly Income'] = stat(
            round(float(average or 0), 2), None, self._growth_rate('income', gn_id)
        )
        return stats

    def _health_rows(self, gn_id):
        return self._grouped(
            self.citizens(gn_id), 'health_conditions__condition_type', distinct=True
        )

    def health_stats(self, gn_id):
        rows = self._health_rows(gn_id)
        stats = distribution((condition_label(kind), count) for kind, count in rows)

        total = sum(count for _, count in rows)
        permanent = HealthCondition.objects.filter(
            citizen__in=self.citizens(gn_id), is_permanent=True
        ).count()
        stats['Permanent Conditions'] = stat(permanent, percent(permanent, total))
        return stats

    def gender_stats(self, gn_id):
        stats = distribution(
            (ucfirst(gender), count)
            for gender, count in self._grouped(self.citizens(gn_id), 'gender')
        )
        heads = self.citizens(gn_id).filter(relation_to_head=Citizen.HEAD_RELATION)
        stats.update(distribution(
            (f"{ucfirst(gender)} Heads", count) for gender, count in self._grouped(heads, 'gender')
        ))
        return stats

    def monthly_report(self, gn_id, year, month):
        updated = (
            self.citizens(gn_id)
            .filter(updated_at__year=year, updated_at__month=month)
            .annotate(updated_day=TruncDate('updated_at'), created_day=TruncDate('created_at'))
            .filter(updated_day__gt=F('created_day'))
            .count()
        )
        return {
            'New Families': stat(
                self._count_for_month('families', gn_id, year, month), None,
                self._monthly_trend('families', gn_id, year, month),
            ),
            'New Citizens': stat(
                self._count_for_month('citizens', gn_id, year, month), None,
                self._monthly_trend('citizens', gn_id, year, month),
            ),
            'Updated Records': stat(updated),
        }

    def registrations_between(self, gn_id, start, end, compare=False):
        """
        Families and citizens registered between two dates, inclusive.

        With ``compare`` each count carries its growth against the
        preceding window of the same length.
        """
        window = (end - start).days + 1
        prev_start, prev_end = start - timedelta(days=window), start - timedelta(days=1)

        stats = {}
        for label, queryset in (('New Families', self.families(gn_id)),
                                ('New Citizens', self.citizens(gn_id))):
            count = queryset.filter(created_at__date__range=(start, end)).count()
            trend = None
            if compare:
                previous = queryset.filter(created_at__date__range=(prev_start, prev_end)).count()
                trend = growth_rate(count, previous)
            stats[label] = stat(count, None, trend)
        return stats

    def registered_in_range(self, gn_id, start, end):
        families = self.families(gn_id).filter(created_at__date__range=(start, end))
        citizens = (
            self.citizens(gn_id)
            .filter(created_at__date__range=(start, end))
            .select_related('family')
        )
        return families, citizens

    # Chart series

    def monthly_registration_trend(self, gn_id, year):
        rows = (
            self.families(gn_id)
            .filter(created_at__year=year)
            .annotate(month=ExtractMonth('created_at'))
            .values('month')
            .annotate(count=Count('id'))
            .order_by('month')
        )
        data = [0] * 12
        for row in rows:
            data[row['month'] - 1] = row['count']

        return {
            'labels': MONTH_LABELS,
            'datasets': [{
                'label': 'Family Registrations',
                'data': data,
                'borderColor': '#36A2EB',
                'backgroundColor': 'rgba(54, 162, 235, 0.2)',
                'fill': True,
            }],
        }

    def population_pyramid(self, gn_id):
        male, female = Citizen.Gender.MALE, Citizen.Gender.FEMALE
        queryset = (
            self.citizens(gn_id)
            .filter(date_of_birth__isnull=False, gender__in=[male, female])
            .annotate(age_group=self._age_case(PYRAMID_BINS, PYRAMID_TOP))
            .values('gender', 'age_group')
            .annotate(count=Count('id'))
            .order_by()
        )
        counts = {(row['gender'], row['age_group']): row['count'] for row in queryset}

        ordered = [label for label, _ in PYRAMID_BINS] + [PYRAMID_TOP]
        labels = [
            label for label in ordered
            if (male, label) in counts or (female, label) in counts
        ]
        return {
            'labels': labels,
            'datasets': [
                {
                    'label': 'Male',
                    'data': [-counts.get((male, label), 0) for label in labels],
                    'backgroundColor': '#36A2EB',
                },
                {
                    'label': 'Female',
                    'data': [counts.get((female, label), 0) for label in labels],
                    'backgroundColor': '#FF6384',
                },
            ],
        }

    def family_size_distribution(self, gn_id):
        sizes = sorted(self._grouped(self.families(gn_id), 'total_members'))
        return {
            'labels': [f"{size} members" for size, _ in sizes],
            'datasets': [{
                'label': 'Number of Families',
                'data': [count for _, count in sizes],
                'backgroundColor': '#4BC0C0',
            }],
        }

    def religion_distribution(self, gn_id):
        rows = sorted(self._grouped(self.citizens(gn_id), 'religion'), key=lambda row: -row[1])[:10]
        return doughnut((('Not specified' if religion is None else religion, count) for religion, count in rows))

    def education_level_distribution(self, gn_id):
        rows = self._education_rows(gn_id)
        return {
            'labels': [education_label(level) for level, _ in rows],
            'datasets': [{
                'label': 'Citizens',
                'data': [count for _, count in rows],
                'backgroundColor': '#9966FF',
            }],
        }

    def employment_type_distribution(self, gn_id):
        rows = self._employment_rows(gn_id)
        return doughnut(
            (employment_label(kind, missing='Unemployed'), count) for kind, count in rows
        )

    def health_condition_distribution(self, gn_id):
        rows = self._health_rows(gn_id)
        return doughnut(
            (condition_label(kind, missing='Healthy'), count) for kind, count in rows
        )

    def age_group_distribution(self, gn_id):
        """Same 5-year bins as the population pyramid."""
        return self.population_pyramid(gn_id)

    def gender_ratio_chart(self, gn_id):
        rows = self._grouped(self.citizens(gn_id), 'gender')
        return doughnut((ucfirst(gender), count) for gender, count in rows)

    def monthly_comparison(self, gn_id, year, month):
        prev_year, prev_month = previous_month(year, month)
        current = self.monthly_report(gn_id, year, month)
        previous = self.monthly_report(gn_id, prev_year, prev_month)

        return {
            'labels': list(current),
            'datasets': [
                {
                    'label': date(year, month, 1).strftime('%b %Y'),
                    'data': [entry['count'] for entry in current.values()],
                    'backgroundColor': '#36A2EB',
                },
                {
                    'label': date(prev_year, prev_month, 1).strftime('%b %Y'),
                    'data': [previous[key]['count'] for key in current],
                    'backgroundColor': '#C9CBCF',
                },
            ],
        }

    # Sidebar

    def quick_stats(self, gn_id):
        avg_size = self.families(gn_id).aggregate(avg=Avg('total_members'))['avg'] or 0
        return QuickStats(
            total_families=self.families(gn_id).count(),
            total_population=self.citizens(gn_id).count(),
            avg_family_size=round(avg_size, 1),
            this_month_registrations=self._this_month_registrations(gn_id),
        )

    def recent_activities(self, gn_id, limit=10):
        head_name = Subquery(
            Citizen.objects.filter(
                family=OuterRef('pk'), relation_to_head=Citizen.HEAD_RELATION
            ).values('full_name')[:1]
        )
        families = self.families(gn_id).annotate(head_name=head_name).order_by('-created_at')[:limit]
        citizens = self.citizens(gn_id).select_related('family').order_by('-created_at')[:limit]

        activities = []
        for family in families:
            details = f"Family ID: {family.family_id}"
            if family.head_name:
                details += f" | Head: {family.head_name}"
            activities.append(ActivityEntry(
                title='New Family Registration',
                description='Family registered in system',
                details=details,
                time_ago=time_ago(family.created_at, self.now),
                created_at=family.created_at,
            ))
        for citizen in citizens:
            activities.append(ActivityEntry(
                title='New Citizen Added',
                description='Citizen added to family',
                details=f"Name: {citizen.full_name} | Family ID: {citizen.family.family_id}",
                time_ago=time_ago(citizen.created_at, self.now),
                created_at=citizen.created_at,
            ))

        activities.sort(key=lambda entry: entry.created_at, reverse=True)
        logger.debug(f"Recent activities for {gn_id}: {len(activities[:limit])} entries")
        return activities[:limit]
