"""
Management command to seed a GN division with sample families.
Intended for demos and local development; records are spread over the
past year so trend charts have something to show.
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone


FIRST_NAMES = {
    'male': ['Nimal', 'Sunil', 'Kamal', 'Ruwan', 'Ajith', 'Mohamed', 'Suresh', 'Kasun', 'Chaminda', 'Pradeep'],
    'female': ['Kumari', 'Nirmala', 'Dilani', 'Fathima', 'Priya', 'Sanduni', 'Chathuri', 'Malani', 'Ishara', 'Nadeesha'],
}
SURNAMES = ['Perera', 'Silva', 'Fernando', 'Jayasinghe', 'Bandara', 'Rajapaksha', 'Wickramasinghe', 'Kumar', 'Hameed', 'Dissanayake']
RELIGIONS = ['Buddhism', 'Hinduism', 'Islam', 'Christianity', None]
ETHNICITIES = ['Sinhala', 'Tamil', 'Moor', 'Burgher', None]
MARITAL_STATUSES = ['single', 'married', 'widowed', 'divorced', None]
RELATIONS = ['Spouse', 'Son', 'Daughter', 'Parent', 'Sibling']


class Command(BaseCommand):
    help = 'Seed a GN division with sample families, citizens and their records'

    def add_arguments(self, parser):
        parser.add_argument(
            '--gn-id',
            type=str,
            default='GN001',
            help='GN division code to seed (default: GN001)',
        )
        parser.add_argument(
            '--families',
            type=int,
            default=25,
            help='Number of families to create (default: 25)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for repeatable data',
        )
        parser.add_argument(
            '--officer',
            type=str,
            default=None,
            help='Also create a GN officer login with this username',
        )
        parser.add_argument(
            '--password',
            type=str,
            default='changeme',
            help='Password for --officer (default: changeme)',
        )
        parser.add_argument(
            '--quiet',
            action='store_true',
            help='Suppress individual family output',
        )

    def handle(self, *args, **options):
        from civreg.registry.models import Family

        gn_id = options['gn_id']
        rng = random.Random(options['seed'])
        quiet = options['quiet']
        now = timezone.now()

        start = Family.objects.filter(gn_id=gn_id).count()
        citizen_count = 0

        with transaction.atomic():
            for index in range(start + 1, start + options['families'] + 1):
                family, members = self._create_family(rng, gn_id, index)
                citizen_count += members

                # auto_now_add cannot be set on create
                created_at = now - timedelta(days=rng.randint(0, 364), hours=rng.randint(0, 23))
                Family.objects.filter(pk=family.pk).update(created_at=created_at)
                family.members.update(created_at=created_at, updated_at=created_at)

                if not quiet:
                    self.stdout.write(f"  Created: {family.family_id} ({members} members)")

        if options['officer']:
            self._create_officer(options['officer'], options['password'], gn_id)

        self.stdout.write(
            self.style.SUCCESS(
                f"GN {gn_id}: {options['families']} families, {citizen_count} citizens created"
            )
        )

    def _create_family(self, rng, gn_id, index):
        from civreg.registry.models import Citizen, Family

        surname = rng.choice(SURNAMES)
        size = rng.randint(1, 6)
        family = Family.objects.create(
            family_id=f"{gn_id}-F{index:04d}",
            gn_id=gn_id,
            address=f"No. {rng.randint(1, 300)}, Temple Road",
            total_members=size,
        )

        religion = rng.choice(RELIGIONS)
        ethnicity = rng.choice(ETHNICITIES)
        for position in range(size):
            gender = rng.choice([Citizen.Gender.MALE, Citizen.Gender.FEMALE])
            age = rng.randint(25, 75) if position == 0 else rng.randint(0, 80)
            citizen = Citizen.objects.create(
                family=family,
                full_name=f"{rng.choice(FIRST_NAMES[gender])} {surname}",
                gender=gender,
                date_of_birth=date.today() - timedelta(days=age * 365 + rng.randint(0, 364)),
                marital_status=rng.choice(MARITAL_STATUSES),
                religion=religion,
                ethnicity=ethnicity,
                relation_to_head=Citizen.HEAD_RELATION if position == 0 else rng.choice(RELATIONS),
            )
            self._add_records(rng, citizen, age)

        return family, size

    def _add_records(self, rng, citizen, age):
        from civreg.registry.models import Education, Employment, HealthCondition

        if age >= 5 and rng.random() < 0.85:
            Education.objects.create(
                citizen=citizen,
                education_level=rng.choice(Education.Level.values),
                is_current=age < 23 and rng.random() < 0.7,
            )
        if age >= 18 and rng.random() < 0.75:
            employment_type = rng.choice(Employment.EmploymentType.values)
            earns = employment_type not in ('unemployed', 'student', 'retired')
            Employment.objects.create(
                citizen=citizen,
                employment_type=employment_type,
                monthly_income=Decimal(rng.randint(25, 250) * 1000) if earns else Decimal('0'),
                is_current_job=rng.random() < 0.9,
            )
        if rng.random() < 0.15:
            HealthCondition.objects.create(
                citizen=citizen,
                condition_type=rng.choice(HealthCondition.ConditionType.values),
                is_permanent=rng.random() < 0.5,
            )

    def _create_officer(self, username, password, gn_id):
        from civreg.accounts.models import User

        user, created = User.objects.get_or_create(
            username=username,
            defaults={
                'role': User.Role.GN,
                'office_code': gn_id,
                'office_name': f"GN Division {gn_id}",
            }
        )
        if created:
            user.set_password(password)
            user.save()
            self.stdout.write(f"  Created officer: {username}")
        else:
            self.stdout.write(self.style.WARNING(f"  Officer {username} already exists, left unchanged"))
