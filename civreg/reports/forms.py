"""
Reports Forms
"""

from datetime import date

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Div, Field, Fieldset, Layout, Row, Submit
from django import forms
from django.conf import settings
from django.urls import reverse
from django.utils import timezone

from .kinds import ReportKind
from .params import current_quarter

MONTH_CHOICES = [(number, date(2000, number, 1).strftime('%B')) for number in range(1, 13)]
QUARTER_CHOICES = [(number, f"Q{number}") for number in range(1, 5)]


class PeriodForm(forms.Form):
    """Year/month/quarter selector shown above every report."""

    report = forms.CharField(widget=forms.HiddenInput, required=False)
    year = forms.TypedChoiceField(coerce=int, choices=())
    month = forms.TypedChoiceField(coerce=int, choices=MONTH_CHOICES)
    quarter = forms.TypedChoiceField(coerce=int, choices=QUARTER_CHOICES)

    def __init__(self, *args, report_request=None, today=None, **kwargs):
        if report_request is not None:
            kwargs.setdefault('initial', {
                'report': report_request.report_type,
                'year': report_request.year,
                'month': report_request.month,
                'quarter': report_request.quarter,
            })
        super().__init__(*args, **kwargs)

        today = today or timezone.localdate()
        first_year, last_year = settings.REPORT_YEAR_RANGE
        self.fields['year'].choices = [
            (year, str(year)) for year in range(first_year, min(today.year, last_year) + 1)
        ]

        columns = [Column('year', css_class='col-md-3')]
        if report_request is not None and report_request.is_monthly:
            columns.append(Column('month', css_class='col-md-3'))
        else:
            del self.fields['month']
        columns.append(Column('quarter', css_class='col-md-3'))
        columns.append(Column(
            Submit('apply', 'Apply', css_class='btn-primary w-100'),
            css_class='col-md-3 d-flex align-items-end mb-3',
        ))

        self.helper = FormHelper()
        self.helper.form_method = 'get'
        self.helper.form_id = 'reportPeriodForm'
        self.helper.layout = Layout('report', Row(*columns))


class CustomReportForm(forms.Form):
    """Options for a custom report built over a date range."""

    REPORT_TYPE_CHOICES = [
        ('summary', 'Summary Report'),
        ('detailed', 'Detailed Analysis'),
        ('comparison', 'Comparison Report'),
        ('trend', 'Trend Analysis'),
    ]
    TIME_PERIOD_CHOICES = [
        ('monthly', 'This Month'),
        ('quarterly', 'This Quarter'),
        ('yearly', 'This Year'),
        ('custom', 'Custom Range'),
    ]
    CATEGORY_CHOICES = [
        (kind.value, kind.label)
        for kind in ReportKind
        if kind not in (ReportKind.OVERVIEW, ReportKind.MONTHLY)
    ]
    FORMAT_CHOICES = [
        ('html', 'HTML'),
        ('csv', 'CSV'),
    ]

    custom_report_type = forms.ChoiceField(label='Report Type', choices=REPORT_TYPE_CHOICES)
    time_period = forms.ChoiceField(choices=TIME_PERIOD_CHOICES, initial='monthly')
    start_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={'type': 'date'})
    )
    end_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={'type': 'date'})
    )
    categories = forms.MultipleChoiceField(
        label='Include Categories',
        choices=CATEGORY_CHOICES,
        widget=forms.CheckboxSelectMultiple,
    )
    format = forms.ChoiceField(label='Output Format', choices=FORMAT_CHOICES, initial='html')

    def __init__(self, *args, today=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.today = today or timezone.localdate()

        self.helper = FormHelper()
        self.helper.form_method = 'get'
        self.helper.form_id = 'customReportForm'
        self.helper.form_action = reverse('reports:custom')
        self.helper.layout = Layout(
            Fieldset(
                'Report Options',
                Row(
                    Column('custom_report_type', css_class='col-md-6'),
                    Column('time_period', css_class='col-md-6'),
                ),
                Div(
                    Row(
                        Column('start_date', css_class='col-md-6'),
                        Column('end_date', css_class='col-md-6'),
                    ),
                    css_id='customDateRange',
                ),
                Field('categories'),
                'format',
            ),
            Div(
                Submit('generate', 'Generate Report', css_class='btn-primary'),
                css_class='mt-3'
            ),
        )

    def period_bounds(self, time_period):
        """First day of the current month/quarter/year through today."""
        today = self.today
        if time_period == 'monthly':
            return today.replace(day=1), today
        if time_period == 'quarterly':
            first_month = (current_quarter(today.month) - 1) * 3 + 1
            return today.replace(month=first_month, day=1), today
        return today.replace(month=1, day=1), today

    def clean(self):
        cleaned_data = super().clean()
        time_period = cleaned_data.get('time_period')

        if time_period and time_period != 'custom':
            cleaned_data['start_date'], cleaned_data['end_date'] = self.period_bounds(time_period)
            return cleaned_data

        start = cleaned_data.get('start_date')
        end = cleaned_data.get('end_date')

        if time_period == 'custom' and (not start or not end):
            raise forms.ValidationError('A custom range needs both a start and an end date.')
        if start and end and start > end:
            raise forms.ValidationError('Start date must be before end date.')

        return cleaned_data

    @property
    def compares_periods(self):
        return self.cleaned_data.get('custom_report_type') in ('comparison', 'trend')
