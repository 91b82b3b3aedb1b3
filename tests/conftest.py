import itertools
from datetime import datetime

import pytest
from django.utils import timezone

from civreg.accounts.models import User
from civreg.registry.models import Citizen, Family


def aware(year, month, day, hour=12):
    return timezone.make_aware(datetime(year, month, day, hour, 0))


def backdate(family, when, updated=None):
    """Move a family and its members to ``when``; auto_now_add ignores values on create."""
    Family.objects.filter(pk=family.pk).update(created_at=when, updated_at=updated or when)
    Citizen.objects.filter(family=family).update(created_at=when, updated_at=updated or when)


@pytest.fixture
def gn_user(db):
    return User.objects.create_user(
        username='gn_officer',
        password='secret-pass',
        role=User.Role.GN,
        office_code='GN001',
        office_name='Kotte North',
    )


@pytest.fixture
def district_user(db):
    return User.objects.create_user(
        username='district_officer',
        password='secret-pass',
        role=User.Role.DISTRICT,
        office_code='D01',
        office_name='Colombo District',
    )


@pytest.fixture
def gn_client(client, gn_user):
    client.force_login(gn_user)
    return client


@pytest.fixture
def make_family(db):
    counter = itertools.count(1)

    def _make(gn_id='GN001', members=(), created_at=None):
        family = Family.objects.create(
            family_id=f"{gn_id}-F{next(counter):03d}",
            gn_id=gn_id,
            total_members=len(members),
        )
        for member in members:
            Citizen.objects.create(family=family, **{'full_name': 'Member', **member})
        if created_at is not None:
            backdate(family, created_at)
        return family

    return _make
