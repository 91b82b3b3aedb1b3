"""
Registry models - families and citizens of a GN division
"""

from django.db import models


class Family(models.Model):
    """
    A registered household.
    ``gn_id`` is the GN division the family belongs to; it is the scope key
    for every report.
    """

    family_id = models.CharField(max_length=50, unique=True)
    gn_id = models.CharField(max_length=50, db_index=True)
    address = models.TextField(blank=True)
    total_members = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Family'
        verbose_name_plural = 'Families'
        ordering = ['-created_at']

    def __str__(self):
        return self.family_id

    @property
    def head(self):
        return self.members.filter(relation_to_head=Citizen.HEAD_RELATION).first()


class Citizen(models.Model):
    """A person registered as a member of a family."""

    HEAD_RELATION = 'Self'

    class Gender(models.TextChoices):
        MALE = 'male', 'Male'
        FEMALE = 'female', 'Female'
        OTHER = 'other', 'Other'

    family = models.ForeignKey(
        Family,
        on_delete=models.CASCADE,
        related_name='members'
    )
    full_name = models.CharField(max_length=255)
    gender = models.CharField(max_length=10, choices=Gender.choices)
    date_of_birth = models.DateField(null=True, blank=True)
    marital_status = models.CharField(max_length=30, null=True, blank=True)
    religion = models.CharField(max_length=50, null=True, blank=True)
    ethnicity = models.CharField(max_length=50, null=True, blank=True)
    relation_to_head = models.CharField(
        max_length=50,
        default=HEAD_RELATION,
        help_text="Relationship to the head of family ('Self' for the head)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Citizen'
        verbose_name_plural = 'Citizens'
        ordering = ['-created_at']

    def __str__(self):
        return self.full_name


class Education(models.Model):
    """Education record of a citizen."""

    class Level(models.TextChoices):
        GRADE_1 = '1', 'Grade 1'
        GRADE_2 = '2', 'Grade 2'
        GRADE_3 = '3', 'Grade 3'
        GRADE_4 = '4', 'Grade 4'
        GRADE_5 = '5', 'Grade 5'
        GRADE_6 = '6', 'Grade 6'
        GRADE_7 = '7', 'Grade 7'
        GRADE_8 = '8', 'Grade 8'
        GRADE_9 = '9', 'Grade 9'
        GRADE_10 = '10', 'Grade 10'
        OL = 'ol', 'O/L'
        AL = 'al', 'A/L'
        DIPLOMA = 'diploma', 'Diploma'
        DEGREE = 'degree', 'Degree'
        MASTERS = 'masters', "Master's"
        MPHIL = 'mphil', 'MPhil'
        PHD = 'phd', 'PhD'

        @classmethod
        def ranked(cls):
            """Levels from highest to lowest, as reports list them."""
            return [
                cls.PHD, cls.MPHIL, cls.MASTERS, cls.DEGREE, cls.DIPLOMA, cls.AL, cls.OL,
                cls.GRADE_10, cls.GRADE_9, cls.GRADE_8, cls.GRADE_7, cls.GRADE_6,
                cls.GRADE_5, cls.GRADE_4, cls.GRADE_3, cls.GRADE_2, cls.GRADE_1,
            ]

    citizen = models.ForeignKey(
        Citizen,
        on_delete=models.CASCADE,
        related_name='education_records'
    )
    education_level = models.CharField(max_length=20, choices=Level.choices)
    institution = models.CharField(max_length=255, blank=True)
    is_current = models.BooleanField(default=False, help_text='Currently studying')

    class Meta:
        verbose_name = 'Education Record'
        verbose_name_plural = 'Education Records'

    def __str__(self):
        return f"{self.citizen} - {self.get_education_level_display()}"


class Employment(models.Model):
    """Employment record of a citizen."""

    class EmploymentType(models.TextChoices):
        GOVERNMENT = 'government', 'Government'
        PRIVATE = 'private', 'Private Sector'
        SELF = 'self', 'Self-employed'
        LABOR = 'labor', 'Labor'
        UNEMPLOYED = 'unemployed', 'Unemployed'
        STUDENT = 'student', 'Student'
        RETIRED = 'retired', 'Retired'

    citizen = models.ForeignKey(
        Citizen,
        on_delete=models.CASCADE,
        related_name='employment_records'
    )
    employment_type = models.CharField(max_length=20, choices=EmploymentType.choices)
    employer = models.CharField(max_length=255, blank=True)
    monthly_income = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    is_current_job = models.BooleanField(default=True)

    class Meta:
        verbose_name = 'Employment Record'
        verbose_name_plural = 'Employment Records'

    def __str__(self):
        return f"{self.citizen} - {self.get_employment_type_display()}"


class HealthCondition(models.Model):
    """Known health condition of a citizen."""

    class ConditionType(models.TextChoices):
        DISABILITY = 'disability', 'Disability'
        CHRONIC_DISEASE = 'chronic_disease', 'Chronic Disease'
        MENTAL_HEALTH = 'mental_health', 'Mental Health'
        OTHER = 'other', 'Other Conditions'

    citizen = models.ForeignKey(
        Citizen,
        on_delete=models.CASCADE,
        related_name='health_conditions'
    )
    condition_type = models.CharField(max_length=30, choices=ConditionType.choices)
    description = models.TextField(blank=True)
    is_permanent = models.BooleanField(default=False)

    class Meta:
        verbose_name = 'Health Condition'
        verbose_name_plural = 'Health Conditions'

    def __str__(self):
        return f"{self.citizen} - {self.get_condition_type_display()}"
