from django.contrib import admin

from .models import Citizen, Education, Employment, Family, HealthCondition


class CitizenInline(admin.TabularInline):
    model = Citizen
    extra = 0
    fields = ['full_name', 'gender', 'date_of_birth', 'relation_to_head']


@admin.register(Family)
class FamilyAdmin(admin.ModelAdmin):
    list_display = ['family_id', 'gn_id', 'total_members', 'created_at']
    list_filter = ['gn_id']
    search_fields = ['family_id', 'address']
    inlines = [CitizenInline]


@admin.register(Citizen)
class CitizenAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'gender', 'date_of_birth', 'family', 'relation_to_head']
    list_filter = ['gender', 'family__gn_id']
    search_fields = ['full_name', 'family__family_id']


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ['citizen', 'education_level', 'is_current']
    list_filter = ['education_level', 'is_current']


@admin.register(Employment)
class EmploymentAdmin(admin.ModelAdmin):
    list_display = ['citizen', 'employment_type', 'monthly_income', 'is_current_job']
    list_filter = ['employment_type', 'is_current_job']


@admin.register(HealthCondition)
class HealthConditionAdmin(admin.ModelAdmin):
    list_display = ['citizen', 'condition_type', 'is_permanent']
    list_filter = ['condition_type', 'is_permanent']
