from io import StringIO

import pytest
from django.core.management import call_command

from civreg.accounts.models import User
from civreg.registry.models import Citizen, Family

pytestmark = pytest.mark.django_db


def test_seed_registry_creates_division_data():
    out = StringIO()
    call_command('seed_registry', '--gn-id', 'GN042', '--families', '4', '--seed', '7',
                 '--quiet', '--officer', 'gn042', stdout=out)

    families = Family.objects.filter(gn_id='GN042')
    assert families.count() == 4
    for family in families:
        assert family.members.count() == family.total_members
        assert family.head is not None
    assert Citizen.objects.filter(family__gn_id='GN042').count() > 0

    officer = User.objects.get(username='gn042')
    assert officer.role == User.Role.GN
    assert officer.office_code == 'GN042'
    assert officer.check_password('changeme')
    assert 'GN GN042: 4 families' in out.getvalue()


def test_seed_registry_appends_family_ids():
    call_command('seed_registry', '--families', '2', '--seed', '1', '--quiet', stdout=StringIO())
    call_command('seed_registry', '--families', '2', '--seed', '1', '--quiet', stdout=StringIO())

    assert sorted(Family.objects.values_list('family_id', flat=True)) == [
        'GN001-F0001', 'GN001-F0002', 'GN001-F0003', 'GN001-F0004',
    ]


def test_create_default_admin():
    call_command('create_default_admin', stdout=StringIO())

    admin = User.objects.get(username='admin')
    assert admin.role == User.Role.MOHA
    assert admin.is_superuser


def test_create_default_admin_skips_when_users_exist(gn_user):
    out = StringIO()
    call_command('create_default_admin', stdout=out)

    assert not User.objects.filter(username='admin').exists()
    assert 'Users already exist' in out.getvalue()
