"""
Custom User model and authentication for the civil registry
"""

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Custom user manager for registry officers."""

    def create_user(self, username, password=None, **extra_fields):
        """Create and return a regular user."""
        if not username:
            raise ValueError('The Username field must be set')
        username = username.strip().lower()  # Normalize username
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        """Create and return a superuser."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.Role.MOHA)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(username, password, **extra_fields)


class User(AbstractUser):
    """
    Registry officer account.

    Every officer belongs to exactly one office in the administrative
    hierarchy (ministry > district > division > GN division). ``office_code``
    identifies that office and scopes every report the officer can open.
    """

    class Role(models.TextChoices):
        MOHA = 'moha', 'Ministry (MOHA)'
        DISTRICT = 'district', 'District Secretariat'
        DIVISION = 'division', 'Divisional Secretariat'
        GN = 'gn', 'Grama Niladhari'

    username = models.CharField('Username', max_length=150, unique=True)
    email = models.EmailField('Email Address', blank=True)

    # Role-based access
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.GN,
        help_text='User role determines which dashboards are available'
    )

    # Office the user works for
    office_code = models.CharField(
        max_length=50,
        blank=True,
        db_index=True,
        help_text='Code of the office this user administers (e.g. GN division id)'
    )
    office_name = models.CharField(max_length=255, blank=True)

    # Profile fields
    full_name = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=50, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        """Return full name or username."""
        return self.full_name or self.username

    @property
    def is_gn_officer(self):
        return self.role == self.Role.GN
