from datetime import date
from decimal import Decimal

import pytest

from civreg.registry.models import Citizen, Education, Employment, HealthCondition
from civreg.reports.generator import (
    ReportGenerator, growth_rate, percent, previous_month, years_ago,
)
from tests.conftest import aware

pytestmark = pytest.mark.django_db

MALE = Citizen.Gender.MALE
FEMALE = Citizen.Gender.FEMALE


@pytest.fixture
def generator():
    return ReportGenerator(now=aware(2024, 3, 15))


@pytest.fixture
def registry(make_family):
    """Two GN001 families (March and February 2024) and one in GN002."""
    march = make_family('GN001', [
        {'full_name': 'Nimal Perera', 'gender': MALE, 'date_of_birth': date(1980, 5, 1),
         'marital_status': 'married', 'religion': 'Buddhism'},
        {'full_name': 'Kumari Perera', 'gender': FEMALE, 'date_of_birth': date(1985, 2, 1),
         'marital_status': 'married', 'religion': 'Buddhism', 'relation_to_head': 'Spouse'},
    ], created_at=aware(2024, 3, 5))
    february = make_family('GN001', [
        {'full_name': 'Fathima Hameed', 'gender': FEMALE, 'date_of_birth': date(1950, 1, 1),
         'religion': 'Islam'},
    ], created_at=aware(2024, 2, 10))
    other = make_family('GN002', [
        {'full_name': 'Outside Person', 'gender': MALE, 'date_of_birth': date(2000, 1, 1)},
    ], created_at=aware(2024, 3, 6))
    return march, february, other


def test_growth_rate():
    assert growth_rate(15, 10) == 50.0
    assert growth_rate(5, 10) == -50.0
    assert growth_rate(3, 0) == 100
    assert growth_rate(0, 0) == 0


def test_percent_and_previous_month():
    assert percent(1, 3) == 33.3
    assert percent(1, 0) == 0
    assert previous_month(2024, 1) == (2023, 12)
    assert previous_month(2024, 3) == (2024, 2)


def test_years_ago_on_leap_day():
    assert years_ago(date(2024, 2, 29), 1) == date(2023, 2, 28)
    assert years_ago(date(2024, 2, 29), 4) == date(2020, 2, 29)


def test_queries_are_scoped_to_division(generator, registry):
    stats = generator.overview_stats('GN001')

    assert stats['total_families']['count'] == 2
    assert stats['total_population']['count'] == 3
    assert generator.overview_stats('GN002')['total_population']['count'] == 1
    assert generator.overview_stats('GN404')['total_families']['count'] == 0


def test_overview_stats(generator, registry):
    stats = generator.overview_stats('GN001')

    assert stats['avg_family_size']['count'] == 1.5
    assert stats['male_population'] == {'count': 1, 'percentage': 33.3, 'trend': None}
    assert stats['female_population']['count'] == 2
    assert stats['female_population']['percentage'] == 66.7
    assert stats['this_month_registrations']['count'] == 1
    # 2 families now against 1 registered last month
    assert stats['total_families']['trend'] == 100.0
    # population: 3 now against 1 citizen registered last month
    assert stats['total_population']['trend'] == 200.0


def test_empty_division_has_zero_stats(generator, db):
    stats = generator.overview_stats('GN001')

    assert stats['total_families'] == {'count': 0, 'percentage': 100, 'trend': 0}
    assert stats['avg_family_size']['count'] == 0
    assert stats['male_population']['percentage'] == 0


def test_age_group_boundaries(generator, make_family):
    make_family(members=[
        {'gender': MALE, 'date_of_birth': date(2023, 3, 16)},
        {'gender': MALE, 'date_of_birth': date(2023, 3, 15)},
        {'gender': FEMALE, 'date_of_birth': date(1960, 1, 1)},
        {'gender': FEMALE, 'date_of_birth': None},
    ])

    stats = generator.age_group_stats('GN001')

    assert list(stats) == ['Infant (0)', 'Toddler (1-5)', 'Senior (60+)']
    assert stats['Infant (0)'] == {'count': 1, 'percentage': 25.0, 'trend': None}
    assert stats['Toddler (1-5)']['count'] == 1
    assert stats['Senior (60+)'] == {'count': 2, 'percentage': 50.0, 'trend': None}


def test_population_stats_combines_gender_and_age(generator, registry):
    stats = generator.population_stats('GN001')

    assert stats['male']['count'] == 1
    assert stats['female']['count'] == 2
    assert stats['Adult (36-60)']['count'] == 2
    assert stats['Senior (60+)']['count'] == 1


def test_population_pyramid_aligns_series(generator, make_family):
    make_family(members=[
        {'gender': MALE, 'date_of_birth': date(2020, 1, 1)},
        {'gender': FEMALE, 'date_of_birth': date(1990, 6, 1)},
        {'gender': FEMALE, 'date_of_birth': date(1950, 1, 1)},
        {'gender': MALE, 'date_of_birth': None},
    ])

    chart = generator.population_pyramid('GN001')
    male, female = chart['datasets']

    assert chart['labels'] == ['0-4', '30-34', '60+']
    assert male['data'] == [-1, 0, 0]
    assert female['data'] == [0, 1, 1]


def test_family_stats(generator, registry):
    stats = generator.family_stats('GN001')

    assert stats['Family Size 1'] == {'count': 1, 'percentage': 50.0, 'trend': None}
    assert stats['Family Size 2']['count'] == 1
    assert stats['Marital: Married']['count'] == 2
    assert stats['Marital: Not specified']['count'] == 1


def test_demographic_stats_orders_by_count(generator, registry):
    stats = generator.demographic_stats('GN001')

    religions = [key for key in stats if key.startswith('Religion')]
    assert religions == ['Religion: Buddhism', 'Religion: Islam']
    assert stats['Ethnicity: Not specified']['count'] == 3


def test_education_stats(generator, make_family):
    family = make_family(members=[
        {'full_name': 'Graduate', 'gender': MALE},
        {'full_name': 'Student', 'gender': FEMALE, 'relation_to_head': 'Daughter'},
        {'full_name': 'Unschooled', 'gender': MALE, 'relation_to_head': 'Son'},
        {'full_name': 'Repeat', 'gender': FEMALE, 'relation_to_head': 'Daughter'},
    ])
    graduate, student, _, repeat = family.members.order_by('pk')
    Education.objects.create(citizen=graduate, education_level='degree')
    Education.objects.create(citizen=student, education_level='ol', is_current=True)
    Education.objects.create(citizen=repeat, education_level='al')
    Education.objects.create(citizen=repeat, education_level='al')

    stats = generator.education_stats('GN001')

    assert list(stats) == ['Degree', 'A/L', 'O/L', 'No Education', 'Current Students']
    assert stats['A/L']['count'] == 1
    assert stats['No Education'] == {'count': 1, 'percentage': 25.0, 'trend': None}
    assert stats['Current Students'] == {'count': 1, 'percentage': 25.0, 'trend': None}

    chart = generator.education_level_distribution('GN001')
    assert chart['labels'] == ['Degree', 'A/L', 'O/L', 'No Education']


def test_employment_stats(generator, make_family):
    family = make_family(members=[
        {'full_name': 'Clerk', 'gender': MALE},
        {'full_name': 'Former', 'gender': FEMALE, 'relation_to_head': 'Spouse'},
        {'full_name': 'Child', 'gender': MALE, 'relation_to_head': 'Son'},
        {'full_name': 'Trader', 'gender': FEMALE, 'relation_to_head': 'Daughter'},
    ])
    clerk, former, _, trader = family.members.order_by('pk')
    Employment.objects.create(citizen=clerk, employment_type='government', monthly_income=Decimal('50000'))
    Employment.objects.create(citizen=former, employment_type='private', is_current_job=False)
    Employment.objects.create(citizen=trader, employment_type='self', monthly_income=Decimal('0'))

    stats = generator.employment_stats('GN001')

    assert stats['Government']['count'] == 1
    assert stats['Self-employed']['count'] == 1
    assert stats['Not Employed'] == {'count': 2, 'percentage': 50.0, 'trend': None}
    assert 'Private Sector' not in stats
    assert stats['Average Monthly Income']['count'] == 50000.0
    assert stats['Average Monthly Income']['trend'] == 100

    chart = generator.employment_type_distribution('GN001')
    assert 'Unemployed' in chart['labels']


def test_health_stats(generator, make_family):
    family = make_family(members=[
        {'full_name': 'Patient', 'gender': MALE},
        {'full_name': 'Healthy', 'gender': FEMALE, 'relation_to_head': 'Spouse'},
    ])
    patient = family.members.get(full_name='Patient')
    HealthCondition.objects.create(citizen=patient, condition_type='disability', is_permanent=True)

    stats = generator.health_stats('GN001')

    assert stats['Disability'] == {'count': 1, 'percentage': 50.0, 'trend': None}
    assert stats['No Conditions']['count'] == 1
    assert stats['Permanent Conditions'] == {'count': 1, 'percentage': 50.0, 'trend': None}

    chart = generator.health_condition_distribution('GN001')
    assert sorted(chart['labels']) == ['Disability', 'Healthy']


def test_gender_stats_counts_heads(generator, registry):
    stats = generator.gender_stats('GN001')

    assert stats['Male']['count'] == 1
    assert stats['Female']['count'] == 2
    assert stats['Male Heads'] == {'count': 1, 'percentage': 50.0, 'trend': None}
    assert stats['Female Heads'] == {'count': 1, 'percentage': 50.0, 'trend': None}


def test_gender_heads_share_of_all_heads(generator, make_family):
    make_family('GN001', [{'gender': MALE}, {'gender': FEMALE, 'relation_to_head': 'Spouse'}])
    make_family('GN001', [{'gender': MALE}])
    make_family('GN001', [{'gender': FEMALE}])

    stats = generator.gender_stats('GN001')

    assert stats['Male Heads'] == {'count': 2, 'percentage': 66.7, 'trend': None}
    assert stats['Female Heads'] == {'count': 1, 'percentage': 33.3, 'trend': None}
    assert stats['Female']['percentage'] == 50.0


def test_monthly_report(generator, registry):
    march, _, _ = registry
    Citizen.objects.filter(family=march, full_name='Nimal Perera').update(updated_at=aware(2024, 3, 20))

    report = generator.monthly_report('GN001', 2024, 3)

    assert report['New Families'] == {'count': 1, 'percentage': None, 'trend': 0.0}
    assert report['New Citizens'] == {'count': 2, 'percentage': None, 'trend': 100.0}
    assert report['Updated Records']['count'] == 1


def test_monthly_comparison(generator, registry):
    chart = generator.monthly_comparison('GN001', 2024, 3)
    current, previous = chart['datasets']

    assert chart['labels'] == ['New Families', 'New Citizens', 'Updated Records']
    assert current['label'] == 'Mar 2024'
    assert current['data'] == [1, 2, 0]
    assert previous['label'] == 'Feb 2024'
    assert previous['data'] == [1, 1, 0]


def test_monthly_registration_trend(generator, registry):
    chart = generator.monthly_registration_trend('GN001', 2024)

    assert len(chart['labels']) == 12
    assert chart['datasets'][0]['data'][:4] == [0, 1, 1, 0]
    assert sum(generator.monthly_registration_trend('GN001', 2023)['datasets'][0]['data']) == 0


def test_religion_distribution(generator, registry):
    chart = generator.religion_distribution('GN001')

    assert chart['labels'] == ['Buddhism', 'Islam']
    assert chart['datasets'][0]['data'] == [2, 1]


def test_registrations_between(generator, registry):
    stats = generator.registrations_between('GN001', date(2024, 3, 1), date(2024, 3, 31), compare=True)

    assert stats['New Families'] == {'count': 1, 'percentage': None, 'trend': 0.0}
    assert stats['New Citizens']['count'] == 2
    assert stats['New Citizens']['trend'] == 100.0
    assert generator.registrations_between('GN001', date(2024, 3, 1), date(2024, 3, 31))['New Families']['trend'] is None


def test_quick_stats(generator, registry):
    quick = generator.quick_stats('GN001')

    assert quick.total_families == 2
    assert quick.total_population == 3
    assert quick.avg_family_size == 1.5
    assert quick.this_month_registrations == 1


def test_recent_activities_newest_first(generator, registry):
    activities = generator.recent_activities('GN001', limit=3)

    assert len(activities) == 3
    assert [entry.created_at for entry in activities] == sorted(
        (entry.created_at for entry in activities), reverse=True
    )
    family_entry = next(entry for entry in activities if entry.title == 'New Family Registration')
    assert family_entry.details == 'Family ID: GN001-F001 | Head: Nimal Perera'
    assert family_entry.time_ago.replace('\xa0', ' ') == '1 week ago'
    assert all('GN002' not in entry.details for entry in activities)


def test_blank_values_are_kept_apart_from_missing(generator, make_family):
    make_family('GN001', [
        {'gender': MALE, 'religion': '', 'marital_status': ''},
        {'gender': FEMALE, 'religion': None, 'relation_to_head': 'Spouse'},
    ])

    stats = generator.demographic_stats('GN001')
    assert stats['Religion: ']['count'] == 1
    assert stats['Religion: Not specified']['count'] == 1

    family = generator.family_stats('GN001')
    assert family['Marital: ']['count'] == 1
    assert family['Marital: Not specified']['count'] == 1

    chart = generator.religion_distribution('GN001')
    assert sorted(chart['labels']) == ['', 'Not specified']
