"""
Management command to create default admin user.
"""

from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Create default ministry admin user (admin / admin) if no users exist'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Reset admin password even if users exist',
        )
        parser.add_argument(
            '--username',
            type=str,
            default='admin',
            help='Admin username (default: admin)',
        )
        parser.add_argument(
            '--password',
            type=str,
            default='admin',
            help='Admin password (default: admin)',
        )

    def handle(self, *args, **options):
        from civreg.accounts.models import User

        username = options['username']
        password = options['password']

        if User.objects.exists() and not options['force']:
            self.stdout.write(
                self.style.WARNING(
                    'Users already exist. Use --force to reset admin password.'
                )
            )
            return

        user, created = User.objects.get_or_create(
            username=username,
            defaults={
                'is_staff': True,
                'is_superuser': True,
                'is_active': True,
                'role': User.Role.MOHA,
                'full_name': 'Administrator',
                'office_code': 'MOHA',
                'office_name': 'Ministry of Home Affairs',
            }
        )

        if not created:
            user.is_staff = True
            user.is_superuser = True
            user.is_active = True
            user.role = User.Role.MOHA

        user.set_password(password)
        user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f'Created default admin user: {username}'))
        else:
            self.stdout.write(self.style.SUCCESS(f'Reset admin user password: {username}'))

        if password == 'admin':
            self.stdout.write(
                self.style.WARNING('Default password is "admin" - change it immediately!')
            )
