# Generated manually for version control
# Civil Registry - Registry Initial Migration

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Family',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('family_id', models.CharField(max_length=50, unique=True)),
                ('gn_id', models.CharField(db_index=True, max_length=50)),
                ('address', models.TextField(blank=True)),
                ('total_members', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Family',
                'verbose_name_plural': 'Families',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Citizen',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=255)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female'), ('other', 'Other')], max_length=10)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('marital_status', models.CharField(blank=True, max_length=30, null=True)),
                ('religion', models.CharField(blank=True, max_length=50, null=True)),
                ('ethnicity', models.CharField(blank=True, max_length=50, null=True)),
                ('relation_to_head', models.CharField(default='Self', help_text="Relationship to the head of family ('Self' for the head)", max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('family', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='registry.family')),
            ],
            options={
                'verbose_name': 'Citizen',
                'verbose_name_plural': 'Citizens',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Education',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('education_level', models.CharField(choices=[('1', 'Grade 1'), ('2', 'Grade 2'), ('3', 'Grade 3'), ('4', 'Grade 4'), ('5', 'Grade 5'), ('6', 'Grade 6'), ('7', 'Grade 7'), ('8', 'Grade 8'), ('9', 'Grade 9'), ('10', 'Grade 10'), ('ol', 'O/L'), ('al', 'A/L'), ('diploma', 'Diploma'), ('degree', 'Degree'), ('masters', "Master's"), ('mphil', 'MPhil'), ('phd', 'PhD')], max_length=20)),
                ('institution', models.CharField(blank=True, max_length=255)),
                ('is_current', models.BooleanField(default=False, help_text='Currently studying')),
                ('citizen', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='education_records', to='registry.citizen')),
            ],
            options={
                'verbose_name': 'Education Record',
                'verbose_name_plural': 'Education Records',
            },
        ),
        migrations.CreateModel(
            name='Employment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('employment_type', models.CharField(choices=[('government', 'Government'), ('private', 'Private Sector'), ('self', 'Self-employed'), ('labor', 'Labor'), ('unemployed', 'Unemployed'), ('student', 'Student'), ('retired', 'Retired')], max_length=20)),
                ('employer', models.CharField(blank=True, max_length=255)),
                ('monthly_income', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('is_current_job', models.BooleanField(default=True)),
                ('citizen', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='employment_records', to='registry.citizen')),
            ],
            options={
                'verbose_name': 'Employment Record',
                'verbose_name_plural': 'Employment Records',
            },
        ),
        migrations.CreateModel(
            name='HealthCondition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('condition_type', models.CharField(choices=[('disability', 'Disability'), ('chronic_disease', 'Chronic Disease'), ('mental_health', 'Mental Health'), ('other', 'Other Conditions')], max_length=30)),
                ('description', models.TextField(blank=True)),
                ('is_permanent', models.BooleanField(default=False)),
                ('citizen', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='health_conditions', to='registry.citizen')),
            ],
            options={
                'verbose_name': 'Health Condition',
                'verbose_name_plural': 'Health Conditions',
            },
        ),
    ]
